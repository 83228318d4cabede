from setuptools import setup, find_packages

setup(
    name="mise",
    version="1.0.0",
    author="Varun Israni",
    description="Film production record store",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "fastapi",
        "uvicorn",
        "python-dotenv",
        "pandas",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    python_requires=">=3.8",
)
