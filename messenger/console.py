import asyncio
import sys
import threading
from typing import TextIO


class Console:
    """Line-based console I/O over injectable text streams.

    Lines are read by a daemon thread and handed to the event loop through a
    queue, so a pending ``readline`` neither stalls the loop nor keeps the
    process alive after Ctrl-C. End of input raises ``EOFError``.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._lines: asyncio.Queue[str] | None = None
        self._eof = False

    def say(self, text: str = "") -> None:
        print(text, file=self._stdout, flush=True)

    def _start_reader(self) -> asyncio.Queue[str]:
        lines: asyncio.Queue[str] = asyncio.Queue()
        reader = threading.Thread(
            target=self._read_lines,
            args=(asyncio.get_running_loop(), lines),
            name="console-reader",
            daemon=True,
        )
        reader.start()
        return lines

    def _read_lines(self, loop: asyncio.AbstractEventLoop, lines: asyncio.Queue[str]) -> None:
        while True:
            try:
                line = self._stdin.readline()
            except (OSError, ValueError):
                line = ""
            try:
                loop.call_soon_threadsafe(lines.put_nowait, line)
            except RuntimeError:
                # loop already closed
                return
            if not line:
                return

    async def ask(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        if self._eof:
            raise EOFError
        if self._lines is None:
            self._lines = self._start_reader()
        line = await self._lines.get()
        if not line:
            self._eof = True
            raise EOFError
        return line.rstrip("\r\n")

    async def read_choice(self, prompt: str = "Please make your choice: ") -> int:
        while True:
            answer = await self.ask(prompt)
            try:
                return int(answer.strip())
            except ValueError:
                self.say("Your input is invalid!")

    async def pick(self, items: list, prompt: str):
        """Let the user choose one of ``items`` by its 1-based number.

        Returns None when the user enters 0.
        """
        while True:
            choice = await self.read_choice(f"{prompt} Press 0 to go back: ")
            if choice == 0:
                return None
            if 1 <= choice <= len(items):
                return items[choice - 1]
            self.say("Unrecognized choice!")
