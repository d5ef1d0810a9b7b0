from enum import StrEnum


class Environment(StrEnum):
    PAPER = 'PAPER'
    LIVE = 'LIVE'

    def is_simulated(self):
        return self == Environment.PAPER
