from .logger import configure_logging, env_flag
import os

LOGGER = configure_logging(debug=env_flag(os.environ.get("LOG_DEBUG", False)))
