from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

# Warehouse rows are passed through as-is, their columns are owned by the views
Rows = List[Dict[str, Any]]


# =========================
# ERRORS
# =========================
class ErrorEnvelope(BaseModel):
    error: str
    details: Optional[str] = None
    status: Optional[int] = None


# =========================
# APS TOKEN
# =========================
class TokenResponse(BaseModel):
    """
    Token JSON from APS. Unknown fields are kept so the body is relayed verbatim.
    """

    access_token: str
    token_type: str
    expires_in: int

    model_config = ConfigDict(extra="allow")
