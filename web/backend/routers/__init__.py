"""API route handlers."""

from .templates import router as templates_router
from .contracts import router as contracts_router
from .provisioning import router as provisioning_router
