from enum import Enum


class Party(str, Enum):
    PRIMARY_A = "PRIMARY_A"
    PRIMARY_B = "PRIMARY_B"
    OTHER = "OTHER"  # CPU-controlled opponents

    @property
    def is_primary(self) -> bool:
        return self is not Party.OTHER


class GameLabel(str, Enum):
    BLOWOUT = "Blowout"
    CLASSIC = "Classic"
    SOLID_WIN = "SolidWin"
    UPSET = "Upset"
    RIVALRY_BEATDOWN = "RivalryBeatdown"

    @property
    def display(self) -> str:
        return {
            GameLabel.SOLID_WIN: "Solid Win",
            GameLabel.RIVALRY_BEATDOWN: "Rivalry Beatdown",
        }.get(self, self.value)


class RecruitStatus(str, Enum):
    COMMIT = "commit"
    INTEREST = "interest"
    LOST = "lost"


class BattleWinner(str, Enum):
    A = "A"
    B = "B"
    CHAOS = "Chaos"  # both programs show a commit on the same prospect
    NONE = "None"  # undecided
