import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Iterable, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from default_vpc_nuke_modules.aws_resource import Vpc
from default_vpc_nuke_modules.exceptions import (
    CleanupCancelled,
    FatalCleanupError,
    ResourceCleanupError,
)
from default_vpc_nuke_modules.resource_filters import is_default_vpc
from default_vpc_nuke_modules.vpc_cleaner import VPCCleaner

logger = logging.getLogger(__name__)


class RegionCoordinator:
    """Deletes the default VPCs of every region, one worker thread per region.

    The first VPC that cannot be cleaned up or deleted is fatal for the whole
    run: it sets ``cancel_event`` so the other workers stop before their next
    remote call, and ``delete_all_default_vpcs`` re-raises it as a
    FatalCleanupError once every worker has returned. Each call to
    ``delete_all_default_vpcs`` starts with a fresh ``cancel_event``.
    """

    def __init__(self, gateway: Any):
        self.gateway = gateway
        self.cancel_event = threading.Event()

    def get_regions(self, only: Optional[Iterable[str]] = None) -> List[str]:
        regions = self.gateway.list_regions()
        logger.debug(f"Discovered regions: {regions}")
        if not only:
            return regions

        wanted = list(only)
        for region in wanted:
            if region not in regions:
                logger.warning(f"Ignoring unknown or disabled region: {region}")
        return [region for region in regions if region in wanted]

    @staticmethod
    def get_default_vpcs(gateway: Any) -> List[str]:
        vpcs = [Vpc.from_description(d, d["VpcId"], gateway) for d in gateway.list_resources("vpc")]
        return [vpc.resource_id for vpc in vpcs if is_default_vpc(vpc)]

    def delete_all_default_vpcs(self, regions: List[str]) -> None:
        self.cancel_event = threading.Event()
        fatal_error = None

        if regions:
            # boto3 sessions are not thread safe; clients are built up front
            gateways = {region: self.gateway.for_region(region) for region in regions}

            with ThreadPoolExecutor(max_workers=len(regions)) as executor:
                future_map = {
                    executor.submit(self.cleanup_region, region, gateways[region]): region
                    for region in regions
                }
                for fut in as_completed(future_map):
                    region = future_map[fut]
                    try:
                        fut.result()
                    except CleanupCancelled:
                        logger.warning(f"Stopped processing region {region} after a failure elsewhere")
                    except FatalCleanupError as e:
                        self.cancel_event.set()
                        if fatal_error is None:
                            fatal_error = e
                    except Exception:
                        self.cancel_event.set()
                        raise

        if fatal_error is not None:
            raise fatal_error

        logger.info("All default VPCs deleted.")

    def cleanup_region(self, region: str, gateway: Any) -> None:
        logger.info(f"Processing region: {region}")
        if self.cancel_event.is_set():
            raise CleanupCancelled(f"cleanup in region {region} cancelled")

        try:
            vpc_ids = self.get_default_vpcs(gateway)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error fetching default VPCs in region {region}: {e}")
            return

        cleaner = VPCCleaner(gateway, self.cancel_event)
        for vpc_id in vpc_ids:
            try:
                cleaner.cleanup_vpc(vpc_id)
            except (ResourceCleanupError, ClientError, BotoCoreError) as e:
                logger.error(f"Error cleaning up VPC {vpc_id} in region {region}: {e}")
                self.cancel_event.set()
                raise FatalCleanupError(region, vpc_id) from e

        logger.info(f"Finished region: {region}")
