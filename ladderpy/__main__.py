"""Main entry point for ladderpy package."""

from loguru import logger

from ladderpy.cli import create_parser
from ladderpy.core import load_config
from ladderpy.processing import run_pipeline
from ladderpy.utils import add_log_file_handler, setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        config = load_config(args.config, args, parser)
    except ValueError as e:
        parser.error(str(e))

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("=" * 60)
        logger.info("LadderPy - Shortest Word Ladder Finder")
        logger.info("=" * 60)
        logger.info("")
        logger.info("Configuration:")
        if config.start:
            logger.info(f"  Pair: {config.start} -> {config.end}")
        if config.pairs:
            logger.info(f"  Pairs file: {config.pairs}")
        logger.info(f"  Source: {config.source}")
        if config.top_n:
            logger.info(f"  Top N words: {config.top_n}")
        if config.include:
            logger.info(f"  Include file: {config.include}")
        if config.exclude:
            logger.info(f"  Exclude file: {config.exclude}")
        logger.info(f"  Workers: {config.jobs}")
        logger.info("")

    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Processing completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Processing failed")
            logger.error("=" * 60)
        raise


if __name__ == "__main__":
    main()
