"""Predicates deciding which described resources are left in place."""
from default_vpc_nuke_modules.aws_resource import NetworkAcl, RouteTable, SecurityGroup, Vpc

DEFAULT_SECURITY_GROUP_NAME = "default"


def is_main_route_table(rt: RouteTable) -> bool:
    return any(assoc.get("Main", False) for assoc in rt.associations)


def is_default_vpc(vpc: Vpc) -> bool:
    return bool(vpc.is_default)


def is_default_security_group(sg: SecurityGroup) -> bool:
    return sg.group_name == DEFAULT_SECURITY_GROUP_NAME


def is_default_network_acl(acl: NetworkAcl) -> bool:
    return bool(acl.is_default)
