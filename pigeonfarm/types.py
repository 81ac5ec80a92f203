from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


URL_ACTION = "url"


@dataclass
class Action:
    label: str
    kind: str
    target: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Message:
    id: int
    title: str
    body: str
    actions: List[Action] = field(default_factory=list)


@dataclass
class AppContext:
    version: str
    languages: List[str] = field(default_factory=list)

    @property
    def language(self) -> str:
        return self.languages[0] if self.languages else "en"


@dataclass
class ClientConfig:
    url_template: Optional[str]
    show_on_first_launch: bool = False

    @classmethod
    def from_settings(cls, data: Dict[str, Any]) -> "ClientConfig":
        return cls(
            url_template=data.get("message_api") or None,
            show_on_first_launch=bool(data.get("show_on_first_launch", False)),
        )
