from dataclasses import dataclass, field
from typing import List, Optional

import boto3
from botocore.config import Config

DEFAULT_HOME_REGION = "us-east-1"
DEFAULT_MAX_ATTEMPTS = 5


@dataclass
class NukeConfig:
    """Run settings collected from the command line"""

    profile: Optional[str] = None
    home_region: str = DEFAULT_HOME_REGION
    only_regions: List[str] = field(default_factory=list)
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    verbose: bool = False

    @classmethod
    def from_args(cls, args) -> "NukeConfig":
        return cls(
            profile=args.profile,
            home_region=args.region,
            only_regions=args.only_region or [],
            max_attempts=args.max_attempts,
            verbose=args.verbose,
        )

    def botocore_config(self) -> Config:
        return Config(retries={"max_attempts": self.max_attempts, "mode": "standard"})

    def session(self) -> boto3.Session:
        if self.profile:
            return boto3.Session(profile_name=self.profile)
        return boto3.Session()
