"""
OIDC federation configuration of a director site.

The provider fields are owned by the service; unknown keys are kept as
model extras.
"""

from datetime import datetime

from vmware_client.schemas.base_schema import VmwareModel


class OIDC(VmwareModel):
    status: str | None = None
    last_set_at: datetime | None = None
