from __future__ import annotations

from .materializer import MaterializeMode, materialize, plan_entries

__all__ = ["MaterializeMode", "materialize", "plan_entries"]
