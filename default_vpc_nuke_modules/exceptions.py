class NukeError(Exception):
    """Base class for errors raised while tearing down default VPCs"""

    def __str__(self) -> str:
        message = super().__str__()
        if self.__cause__ is not None:
            return f"{message}: {self.__cause__}"
        return message


class ResourceCleanupError(NukeError):
    """A delete or detach call failed for a single resource"""

    def __init__(self, action: str, kind: str, resource_id: str):
        self.action = action
        self.kind = kind
        self.resource_id = resource_id
        super().__init__(f"failed to {action} {kind} {resource_id}")


class CleanupCancelled(NukeError):
    """Raised inside a region worker once another worker has failed"""


class FatalCleanupError(NukeError):
    """A default VPC could not be cleaned up or deleted; the whole run stops"""

    def __init__(self, region: str, vpc_id: str):
        self.region = region
        self.vpc_id = vpc_id
        super().__init__(f"error cleaning up VPC {vpc_id} in region {region}")
