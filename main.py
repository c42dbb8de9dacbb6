import argparse
import logging
import sys

from botocore.exceptions import BotoCoreError, ClientError

from default_vpc_nuke_modules.config import DEFAULT_HOME_REGION, DEFAULT_MAX_ATTEMPTS, NukeConfig
from default_vpc_nuke_modules.ec2_gateway import EC2Gateway
from default_vpc_nuke_modules.exceptions import FatalCleanupError
from default_vpc_nuke_modules.region_coordinator import RegionCoordinator

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Delete the default VPC in every AWS region")
    parser.add_argument("--profile", default=None, help="AWS profile name (default: boto3 credential chain)")
    parser.add_argument(
        "--region",
        default=DEFAULT_HOME_REGION,
        help=f"Region used to discover the other regions (default: {DEFAULT_HOME_REGION})",
    )
    parser.add_argument(
        "--only-region",
        action="append",
        metavar="REGION",
        help="Only clean up this region; may be given more than once",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help=f"Attempts per AWS API call, including retries (default: {DEFAULT_MAX_ATTEMPTS})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(config: NukeConfig, gateway: EC2Gateway) -> int:
    coordinator = RegionCoordinator(gateway)

    try:
        regions = coordinator.get_regions(config.only_regions)
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Unable to describe regions: {e}")
        return 1

    try:
        coordinator.delete_all_default_vpcs(regions)
    except FatalCleanupError as e:
        logger.error(f"Default VPC cleanup aborted: {e}")
        return 1
    return 0


def main(argv=None):
    args = parse_args(argv)
    config = NukeConfig.from_args(args)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # botocore is chatty at DEBUG
    logging.getLogger("botocore").setLevel(logging.WARNING)

    gateway = EC2Gateway(config.home_region, session=config.session(), config=config.botocore_config())
    sys.exit(run(config, gateway))


if __name__ == "__main__":
    main()
