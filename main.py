import logging
import sys

from core.config_loader import load_config
from core.exceptions import ConfigurationError
from web.backend.app import main as run_server

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    try:
        config = load_config()
    except ConfigurationError as e:
        logger.error(f"Refusing to start: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.logging.level)
    run_server(config)


if __name__ == "__main__":
    main()
