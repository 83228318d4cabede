import logging
import uvicorn

from mise.api import create_app
from mise.base_config import LOG_FORMAT, get_storage_config
from mise.projects.coordinator import ProductionCoordinator
from mise.storage import FileBackend

config = get_storage_config()

# Configure logging
logging.basicConfig(
    level=getattr(logging, str(config["log_level"]).upper(), logging.INFO),
    format=LOG_FORMAT
)
logger = logging.getLogger(__name__)

# Initialize coordinator over the local storage directory
coordinator = ProductionCoordinator(FileBackend(config["storage_dir"]))
app = create_app(coordinator)

if __name__ == "__main__":
    logger.info(f"Starting Mise API on {config['api_host']}:{config['api_port']}")
    uvicorn.run(app, host=config["api_host"], port=config["api_port"])
