"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or runs the build stamping job.
"""

import argparse
import json
import logging
import sys

import uvicorn

from cicd_demo.bootstrap import bootstrap_create_application
from cicd_demo.config import config_load_build_stamp_settings, config_load_settings
from cicd_demo.jobs import BuildStampError, job_build_stamp

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list, defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        VersionManifestError: Raised when the version manifest cannot be loaded.
        SystemExit: Raised with code 1 when build stamping fails.
    """

    argument_parser = argparse.ArgumentParser(description="CI/CD demo runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "build"),
        help="Runtime command: `api` starts server, `build` stamps the build artifact",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args(argv)

    if parsed_arguments.command == "build":
        main_build()
        return

    settings = config_load_settings()
    logging.basicConfig(level=settings.log_level)
    application = bootstrap_create_application(settings)
    logger.info("Server running on port %d in %s mode", settings.application_port, settings.environment_name)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


def main_build() -> None:
    """Run the build stamping job with CI environment settings.

    Returns:
        None: Prints the written build info to stdout as side effect.

    Raises:
        SystemExit: Raised with code 1 when the artifact cannot be written.
    """

    settings = config_load_build_stamp_settings()
    logging.basicConfig(level=settings.log_level)
    try:
        result = job_build_stamp(
            source_dir=settings.source_dir,
            output_dir=settings.output_dir,
            settings=settings,
        )
    except BuildStampError as error:
        print(f"Build failed: {error}", file=sys.stderr)
        raise SystemExit(1) from error

    print("Build completed successfully!")
    print("Build info:", json.dumps(result.build_info.domain_to_payload(), indent=2))


if __name__ == "__main__":
    main()
