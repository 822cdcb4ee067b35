from __future__ import annotations

from typing import Any, Dict

# Catalog records are returned verbatim by the remote service; no schema is
# enforced locally.
Establishment = Dict[str, Any]
Product = Dict[str, Any]
