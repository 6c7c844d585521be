"""Write text to the OS clipboard through whichever copy tool is installed."""
import shutil
import subprocess
from typing import List, Sequence

CLIPBOARD_COMMANDS: List[Sequence[str]] = [
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
]


class ClipboardUnavailable(RuntimeError):
    pass


def system_clipboard(text: str) -> None:
    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]):
            subprocess.run(list(command), input=text.encode("utf-8"), check=True)
            return
    raise ClipboardUnavailable("no clipboard tool found (tried pbcopy, wl-copy, xclip, xsel, clip)")
