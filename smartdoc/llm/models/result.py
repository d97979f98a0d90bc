from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class QueryResult:
    content: str
    msg: str
    system_msg: str
    new_msg_history: List[Dict] = field(default_factory=list)
    model_name: str = ""
    kwargs: Dict = field(default_factory=dict)
    input_tokens: int = 0
    output_tokens: int = 0
    cost: float = 0.0
    input_cost: float = 0.0
    output_cost: float = 0.0
