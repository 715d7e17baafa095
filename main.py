import asyncio
import sys

from survivor_draft.infrastructure.draft_config_adapter import DraftConfiguration
from survivor_draft.main import main, setup_logging

if __name__ == "__main__":
    # Initialize configuration
    config = DraftConfiguration.from_env()
    setup_logging(config.log_level, config.log_file)

    sys.exit(asyncio.run(main(config=config)))
