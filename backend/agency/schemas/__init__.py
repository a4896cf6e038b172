"""Aggregate schema imports."""

# Shared
from agency.schemas.common import (  # noqa: F401
    AgencyModel,
    Contact,
    FieldError,
    ValidationResult,
)
from agency.schemas.enums import (  # noqa: F401
    PORT_AGENT_SERVICE_LABELS,
    PORT_TYPE_LABELS,
    PROVIDER_TYPE_LABELS,
    SERVICE_TYPE_LABELS,
    ContainerType,
    PortAgentService,
    PortType,
    ProviderType,
    ServiceType,
    ShippingTerms,
)

# Entities and forms
from agency.schemas.shipping_line import (  # noqa: F401
    RouteInfo,
    ShippingLine,
    ShippingLineFormData,
    transform_shipping_line_row,
)
from agency.schemas.port_agent import (  # noqa: F401
    AgentFeedback,
    PortAgent,
    PortAgentFormData,
    transform_port_agent_row,
)
from agency.schemas.service_provider import (  # noqa: F401
    ServiceProvider,
    ServiceProviderFormData,
    transform_service_provider_row,
)
from agency.schemas.port import Port, transform_port_row  # noqa: F401
from agency.schemas.shipping_rate import (  # noqa: F401
    BestRateResult,
    FreightCostResult,
    ShippingRate,
    ShippingRateFormData,
    SurchargeItem,
    transform_shipping_rate_row,
)

# Dashboard summaries
from agency.schemas.stats import (  # noqa: F401
    FeedbackSummary,
    PortAgentStats,
    PortAgentStatsRecord,
    ShippingLineStats,
    ShippingLineStatsRecord,
)
