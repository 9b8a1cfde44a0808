from __future__ import annotations
from core.context import DashboardSnapshot

class BaseView:
    def __init__(self, snapshot: DashboardSnapshot, symbol: str = "฿"):
        self.snap = snapshot
        self.symbol = symbol

    def render(self):
        raise NotImplementedError
