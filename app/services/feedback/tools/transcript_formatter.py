"""
Description:
Turns an ordered interview transcript into the text block embedded in the
feedback prompt. Each turn becomes one line, `- <role>: <content>`, and the
lines keep the conversation order.

Arguments:
- turns: Sequence of TranscriptTurn models or plain {"role", "content"} mappings.

Returns:
- The formatted transcript, one newline-terminated line per turn.
"""
from typing import Mapping, Sequence, Union
from app.schemas.feedback.transcript_turn import TranscriptTurn

def format_transcript(turns: Sequence[Union[TranscriptTurn, Mapping]]) -> str:
    lines = []
    for turn in turns:
        if isinstance(turn, Mapping):
            role, content = turn.get("role"), turn.get("content")
        else:
            role, content = turn.role, turn.content
        lines.append(f"- {role}: {content}\n")
    return "".join(lines)
