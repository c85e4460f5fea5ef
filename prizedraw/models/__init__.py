"""In-memory domain models."""

from prizedraw.models.draw_result import DrawResult  # noqa: F401
from prizedraw.models.participant import Participant  # noqa: F401
from prizedraw.models.prize import Prize  # noqa: F401
from prizedraw.models.tenant_session import TenantSession  # noqa: F401
