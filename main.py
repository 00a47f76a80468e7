"""Main entry point for configuring energy terms."""

from src.config.config_parser import get_config
from src.core.pipeline import run_configuration_pipeline
from src.reporting.report import format_measure_table
from src.utils.logger import get_logger, set_log_level

logger = get_logger(__name__)


def main(argv=None):
    """Configure the energy terms given by the config file and command line."""
    config = get_config(argv)
    set_log_level(config["logging"]["level"])
    if config["list_measures"]:
        print(format_measure_table())
        return []
    terms = run_configuration_pipeline(config)
    logger.info(f"Configuration completed with {len(terms)} energy term(s).")
    return terms


if __name__ == "__main__":
    main()
