from typing import Dict, Any
import os
from dotenv import load_dotenv

load_dotenv()

# Base configuration for storage and the local API
BASE_STORAGE_CONFIG = {
    "storage_dir": os.getenv("MISE_STORAGE_DIR", os.path.join("static", "storage")),
    "log_level": os.getenv("MISE_LOG_LEVEL", "INFO"),
    "api_host": os.getenv("MISE_API_HOST", "127.0.0.1"),
    "api_port": int(os.getenv("MISE_API_PORT", "8000")),
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def get_storage_config() -> Dict[str, Any]:
    """Get storage configuration."""
    return BASE_STORAGE_CONFIG.copy()

# Keys shared by every part of the app that is not an entity collection
ACTIVE_PROJECT_KEY = "mise_active_project"
IMPORT_HISTORY_KEY = "mise_import_history"
ONBOARDING_KEY = "mise_onboarding_complete"
