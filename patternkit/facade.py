"""Facade: one front object starting up a computer's subsystems."""


def _status(part: str, activity: str) -> str:
    line = f"{part} is {activity}"
    print(line)
    return line


class CPU:
    def run(self) -> str:
        return _status("CPU", "running...")


class HardDisk:
    def read(self) -> str:
        return _status("HardDisk", "reading...")


class Memory:
    def check(self) -> str:
        return _status("Memory", "checking...")


class OS:
    def load(self) -> str:
        return _status("OS", "loading ...")


class MainFrame:
    """Hides the start-up sequence of the parts behind a single call."""

    def __init__(self) -> None:
        self.os = OS()
        self.cpu = CPU()
        self.memory = Memory()
        self.hard_disk = HardDisk()

    def start(self) -> list[str]:
        """Start every part in order and return the lines they reported."""
        return [
            step()
            for step in (
                self.cpu.run,
                self.hard_disk.read,
                self.memory.check,
                self.os.load,
            )
        ]


def main(argv: list[str] | None = None) -> int:
    """Start a computer through its facade; takes no arguments."""
    MainFrame().start()
    return 0