"""
Tests for the command line entry point and its exit codes.
"""
from unittest.mock import patch

import pytest

import main
from default_vpc_nuke_modules.config import NukeConfig
from fakes import FakeCloud, connection_error


def run_main(cloud, argv=()):
    with patch("main.EC2Gateway", return_value=cloud.gateway("us-east-1")) as gateway_cls:
        with pytest.raises(SystemExit) as excinfo:
            main.main(list(argv))
    return excinfo.value.code, gateway_cls


def test_parse_args_defaults():
    args = main.parse_args([])

    config = NukeConfig.from_args(args)
    assert config.profile is None
    assert config.home_region == "us-east-1"
    assert config.only_regions == []
    assert config.max_attempts == 5
    assert config.verbose is False


def test_parse_args_repeated_only_region():
    args = main.parse_args(["--only-region", "eu-west-1", "--only-region", "us-west-2", "--max-attempts", "2", "-v"])

    config = NukeConfig.from_args(args)
    assert config.only_regions == ["eu-west-1", "us-west-2"]
    assert config.max_attempts == 2
    assert config.verbose is True


def test_botocore_config_retries():
    config = NukeConfig(max_attempts=7)

    assert config.botocore_config().retries == {"max_attempts": 7, "mode": "standard"}


def test_exits_zero_when_every_default_vpc_is_deleted(info_logs):
    cloud = FakeCloud(["us-east-1", "us-west-2"])
    cloud.add_default_vpc("us-east-1", "vpc-east")
    cloud.add_default_vpc("us-west-2", "vpc-west")

    code, gateway_cls = run_main(cloud, ["--region", "eu-central-1"])

    assert code == 0
    assert gateway_cls.call_args.args == ("eu-central-1",)
    assert info_logs.messages.count("Deleted VPC: vpc-east") == 1
    assert info_logs.messages.count("Deleted VPC: vpc-west") == 1
    assert info_logs.messages[-1] == "All default VPCs deleted."


def test_exits_non_zero_when_detach_fails(caplog):
    cloud = FakeCloud(["us-east-1"])
    cloud.add_default_vpc("us-east-1", "vpc-1")
    cloud.add("us-east-1", "internet-gateway", InternetGatewayId="igw-1", Attachments=[{"VpcId": "vpc-1"}])
    cloud.fail("detach", "internet-gateway", "igw-1")

    code, _ = run_main(cloud)

    assert code == 1
    assert cloud.calls_for(action="delete") == []
    assert any("igw-1" in message for message in caplog.messages)
    assert "All default VPCs deleted." not in caplog.messages


def test_exits_non_zero_when_regions_cannot_be_listed(caplog):
    cloud = FakeCloud(["us-east-1"])
    cloud.fail("list", "region")

    code, _ = run_main(cloud)

    assert code == 1
    assert any(message.startswith("Unable to describe regions") for message in caplog.messages)


def test_only_region_limits_the_run():
    cloud = FakeCloud(["us-east-1", "us-west-2"])
    cloud.add_default_vpc("us-east-1", "vpc-east")
    cloud.add_default_vpc("us-west-2", "vpc-west")

    code, _ = run_main(cloud, ["--only-region", "us-west-2"])

    assert code == 0
    assert cloud.remaining("us-east-1", "vpc") == ["vpc-east"]
    assert cloud.remaining("us-west-2", "vpc") == []


def test_run_returns_one_on_connection_error_during_cleanup(caplog):
    cloud = FakeCloud(["us-east-1"])
    cloud.add_default_vpc("us-east-1", "vpc-1")
    cloud.add("us-east-1", "subnet", SubnetId="subnet-1", VpcId="vpc-1")
    cloud.fail("delete", "subnet", "subnet-1", error=connection_error())

    assert main.run(NukeConfig(), cloud.gateway("us-east-1")) == 1
    assert any(
        message.startswith("Default VPC cleanup aborted") and "subnet-1" in message
        for message in caplog.messages
    )
    assert cloud.remaining("us-east-1", "vpc") == ["vpc-1"]


def test_run_returns_one_on_connection_error_listing_regions(caplog):
    cloud = FakeCloud(["us-east-1"])
    cloud.fail("list", "region", error=connection_error())

    assert main.run(NukeConfig(), cloud.gateway("us-east-1")) == 1
    assert any(message.startswith("Unable to describe regions") for message in caplog.messages)
