from .summary_agent import SummaryAgent
from .detail_agent import DetailAgent
from .interface_agent import InterfaceAgent
from .checklist import CheckedIngredients
from .detail_session import DetailSession
__all__ = ["SummaryAgent", "DetailAgent", "InterfaceAgent", "CheckedIngredients", "DetailSession"]
