from fastapi import FastAPI
from pydantic import BaseModel
from typing import List, Optional

app = FastAPI()


class Button(BaseModel):
    title: str
    action: str
    url: Optional[str] = None


class Message(BaseModel):
    id: int
    title: str
    message: str
    buttons: List[Button]


MESSAGES = {
    "en": Message(
        id=7,
        title="What's new",
        message="Version __VERSION__ brings faster sync.",
        buttons=[
            Button(title="Read more", action="url", url="https://www.example.com/news"),
            Button(title="Close", action="dismiss"),
        ],
    ),
    "de": Message(
        id=7,
        title="Neuigkeiten",
        message="Version __VERSION__ synchronisiert schneller.",
        buttons=[
            Button(title="Mehr erfahren", action="url", url="https://www.example.com/de/news"),
            Button(title="Schliessen", action="dismiss"),
        ],
    ),
}


@app.get("/api/message", response_model=Message, response_model_exclude_none=True)
def get_message(version: str = "", language: str = "en"):
    msg = MESSAGES.get(language.split("-")[0], MESSAGES["en"])
    return msg.model_copy(update={"message": msg.message.replace("__VERSION__", version or "?")})
