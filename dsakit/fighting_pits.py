"""Team fights where the strongest fighter of each side strikes in turn."""

from __future__ import annotations

from collections.abc import Iterable


class FightingPits:
    """Teams numbered from 1, each a list of fighters sorted by strength."""

    def __init__(self, team_count: int, fighters: Iterable[tuple[int, int]] = ()) -> None:
        if team_count < 1:
            raise ValueError("there must be at least one team")
        self._strengths: list[list[int]] = [[] for _ in range(team_count)]
        for strength, team in fighters:
            self._check_strength(strength)
            self._strengths[self._index(team)].append(strength)
        self._runs: list[list[int]] = []
        for members in self._strengths:
            members.sort()
            runs: list[int] = []
            previous = None
            for strength in members:
                runs.append(runs[-1] + 1 if strength == previous else 1)
                previous = strength
            self._runs.append(runs)

    def _index(self, team: int) -> int:
        if not 1 <= team <= len(self._strengths):
            raise ValueError(f"team {team} is outside 1..{len(self._strengths)}")
        return team - 1

    @staticmethod
    def _check_strength(strength: int) -> None:
        if strength < 1:
            raise ValueError("strength must be positive")

    def add_fighter(self, strength: int, team: int) -> None:
        """Add a fighter at least as strong as every member of ``team``."""
        self._check_strength(strength)
        index = self._index(team)
        members, runs = self._strengths[index], self._runs[index]
        if members and strength < members[-1]:
            raise ValueError("a new fighter must be at least as strong as the team's best")
        runs.append(runs[-1] + 1 if members and strength == members[-1] else 1)
        members.append(strength)

    def _attacker_wins(self, x: int, y: int) -> bool:
        xs, ys = self._strengths[x], self._strengths[y]
        xr, yr = self._runs[x], self._runs[y]
        xi, yi = len(xs) - 1, len(ys) - 1
        while xi >= 0 and yi >= 0:
            skip = max(0, min((xr[xi] - 1) // ys[yi], (yr[yi] - 1) // xs[xi]))
            xi -= skip * ys[yi]
            yi -= skip * xs[xi]
            yi -= xs[xi]
            if yi < 0:
                break
            xi -= ys[yi]
        return xi >= 0

    def fight(self, x: int, y: int) -> int:
        """Return the team that wins when team ``x`` strikes first against team ``y``."""
        return x if self._attacker_wins(self._index(x), self._index(y)) else y