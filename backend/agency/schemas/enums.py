"""Closed token sets for agency entities.

Each enum has a matching frozenset of its raw string tokens, built once at
import, which the validators use for membership checks.  The sets are kept
separate on purpose: ``"trucking"`` is both a port-agent service and a
provider type, but ``"surveyor"`` is only a provider type.
"""

import enum


class ServiceType(str, enum.Enum):
    FCL = "fcl"
    LCL = "lcl"
    BREAKBULK = "breakbulk"
    PROJECT_CARGO = "project_cargo"
    REEFER = "reefer"


class PortAgentService(str, enum.Enum):
    CUSTOMS_CLEARANCE = "customs_clearance"
    STEVEDORING = "stevedoring"
    WAREHOUSING = "warehousing"
    TRUCKING = "trucking"
    DOCUMENTATION = "documentation"
    PORT_CHARGES = "port_charges"
    CONTAINER_HANDLING = "container_handling"


class ProviderType(str, enum.Enum):
    TRUCKING = "trucking"
    WAREHOUSING = "warehousing"
    SURVEYOR = "surveyor"
    INSURANCE = "insurance"
    FUMIGATION = "fumigation"
    LASHING = "lashing"
    CRANE_RENTAL = "crane_rental"
    ESCORT = "escort"


class PortType(str, enum.Enum):
    SEAPORT = "seaport"
    AIRPORT = "airport"
    INLAND = "inland"
    MULTIMODAL = "multimodal"


class ContainerType(str, enum.Enum):
    GP20 = "20GP"
    GP40 = "40GP"
    HC40 = "40HC"
    OT20 = "20OT"
    OT40 = "40OT"
    FR20 = "20FR"
    FR40 = "40FR"
    BREAKBULK = "BREAKBULK"


class ShippingTerms(str, enum.Enum):
    CY_CY = "CY-CY"
    CY_DOOR = "CY-Door"
    DOOR_CY = "Door-CY"
    DOOR_DOOR = "Door-Door"


def _tokens(enum_cls: type[enum.Enum]) -> frozenset[str]:
    return frozenset(member.value for member in enum_cls)


SERVICE_TYPES = _tokens(ServiceType)
PORT_AGENT_SERVICES = _tokens(PortAgentService)
PROVIDER_TYPES = _tokens(ProviderType)
PORT_TYPES = _tokens(PortType)
CONTAINER_TYPES = _tokens(ContainerType)
SHIPPING_TERMS = _tokens(ShippingTerms)


# Display labels for dropdowns and badges
SERVICE_TYPE_LABELS: dict[ServiceType, str] = {
    ServiceType.FCL: "FCL",
    ServiceType.LCL: "LCL",
    ServiceType.BREAKBULK: "Breakbulk",
    ServiceType.PROJECT_CARGO: "Project Cargo",
    ServiceType.REEFER: "Reefer",
}

PORT_AGENT_SERVICE_LABELS: dict[PortAgentService, str] = {
    PortAgentService.CUSTOMS_CLEARANCE: "Customs Clearance",
    PortAgentService.STEVEDORING: "Stevedoring",
    PortAgentService.WAREHOUSING: "Warehousing",
    PortAgentService.TRUCKING: "Trucking",
    PortAgentService.DOCUMENTATION: "Documentation",
    PortAgentService.PORT_CHARGES: "Port Charges",
    PortAgentService.CONTAINER_HANDLING: "Container Handling",
}

PROVIDER_TYPE_LABELS: dict[ProviderType, str] = {
    ProviderType.TRUCKING: "Trucking",
    ProviderType.WAREHOUSING: "Warehousing",
    ProviderType.SURVEYOR: "Surveyor",
    ProviderType.INSURANCE: "Insurance",
    ProviderType.FUMIGATION: "Fumigation",
    ProviderType.LASHING: "Lashing",
    ProviderType.CRANE_RENTAL: "Crane Rental",
    ProviderType.ESCORT: "Escort",
}

PORT_TYPE_LABELS: dict[PortType, str] = {
    PortType.SEAPORT: "Seaport",
    PortType.AIRPORT: "Airport",
    PortType.INLAND: "Inland",
    PortType.MULTIMODAL: "Multimodal",
}
