"""Battle simulation between suited heroes and enemies, driven by text commands."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from itertools import chain
from typing import Iterable, Iterator

MAX_POWER = 5000
OVERHEAT_LEVEL = 500


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass
class Suit:
    """A suit with power, durability, stored energy and heat."""

    power: int = 1000
    durability: int = 500
    energy: int = 300
    heat: int = 0

    def __post_init__(self) -> None:
        self.power = min(self.power, MAX_POWER)
        self.heat = max(self.heat, 0)

    def absorb(self, other: Suit) -> None:
        """Merge another suit into this one."""
        self.power = min(self.power + other.energy, MAX_POWER)
        self.durability += other.durability
        self.energy += other.power

    def take_damage(self, amount: int) -> None:
        self.durability -= amount
        self.energy += amount
        self.heat += amount

    def boost(self, factor: int) -> None:
        """Raise power by ``factor`` percent, at the cost of heat."""
        self.power = min(self.power + _trunc_div(self.power * factor, 100), MAX_POWER)
        self.energy += 5 * factor
        self.heat += factor

    def repair(self, amount: int) -> None:
        self.durability += amount
        self.heat = max(self.heat - amount, 0)

    def is_destroyed(self) -> bool:
        return self.durability <= 0

    def is_shut_down(self) -> bool:
        return self.heat > OVERHEAT_LEVEL


@dataclass
class Avenger:
    """A fighter wearing a suit."""

    name: str
    suit: Suit
    attack_strength: int

    def attack(self, enemy: Avenger) -> None:
        enemy.suit.take_damage(self.attack_strength)

    def upgrade(self, suits: deque) -> bool:
        """Absorb the next spare suit; False when none is left."""
        if not suits:
            return False
        self.suit.absorb(suits.popleft())
        return True

    def repair(self, amount: int) -> None:
        self.suit.repair(amount)

    def status(self) -> str:
        s = self.suit
        return f"{self.name} {s.power} {s.durability} {s.energy} {s.heat}"

    def is_active(self) -> bool:
        return not self.suit.is_destroyed() and not self.suit.is_shut_down()


def _word(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _number(tokens: Iterator[str]) -> int:
    return int(_word(tokens))


class Battle:
    """Both sides of a fight, the spare suits and the battle log."""

    def __init__(self) -> None:
        self.heroes: list[Avenger] = []
        self.enemies: list[Avenger] = []
        self.log: list[str] = []
        self.suits: deque[Suit] = deque()

    def add_hero(self, hero: Avenger) -> None:
        self.heroes.append(hero)

    def add_enemy(self, enemy: Avenger) -> None:
        self.enemies.append(enemy)

    def add_suit(self, suit: Suit) -> None:
        self.suits.append(suit)

    def take_suit(self) -> Suit:
        if not self.suits:
            raise IndexError("no suits left")
        return self.suits.popleft()

    def find(self, name: str) -> Avenger:
        for avenger in chain(self.heroes, self.enemies):
            if avenger.name == name:
                return avenger
        raise KeyError(name)

    def result(self) -> int:
        """1 if heroes lead, -1 if enemies lead, 0 on a tie."""

        def strength(side: list[Avenger]) -> int:
            return sum(
                a.suit.power + a.suit.durability for a in side if a.suit.durability > 0
            )

        heroes, enemies = strength(self.heroes), strength(self.enemies)
        if heroes > enemies:
            return 1
        if heroes < enemies:
            return -1
        return 0

    def _note_overheat(self, avenger: Avenger) -> None:
        if avenger.suit.heat > OVERHEAT_LEVEL:
            self.log.append(f"{avenger.name} suit overheated")

    def run(self, tokens: Iterable[str]) -> list[str]:
        """Execute commands until ``End``; return the printed lines."""
        it = iter(tokens)
        out: list[str] = []
        for command in it:
            if command == "End":
                break
            if command == "Attack":
                first, second = _word(it), _word(it)
                attacker, defender = self.find(first), self.find(second)
                if not attacker.is_active() and defender.suit.durability > 0:
                    continue
                attacker.attack(defender)
                self.log.append(f"{first} attacks {second}")
                if defender.suit.durability < 0:
                    self.log.append(f"{second} suit destroyed")
                elif defender.suit.heat > OVERHEAT_LEVEL:
                    self.log.append(f"{second} suit overheated")
            elif command == "Repair":
                name = _word(it)
                self.find(name).repair(_number(it))
                self.log.append(f"{name} repaired")
            elif command == "BoostPowerByFactor":
                name = _word(it)
                avenger = self.find(name)
                avenger.suit.boost(_number(it))
                self.log.append(f"{name} boosted")
                self._note_overheat(avenger)
            elif command == "BoostPower":
                name = _word(it)
                avenger = self.find(name)
                extra = Suit(*(_number(it) for _ in range(4)))
                avenger.suit.absorb(extra)
                self.log.append(f"{name} boosted")
                self._note_overheat(avenger)
            elif command == "AvengerStatus":
                out.append(self.find(_word(it)).status())
            elif command == "Upgrade":
                name = _word(it)
                if self.find(name).upgrade(self.suits):
                    self.log.append(f"{name} upgraded")
                else:
                    self.log.append(f"{name} upgrade Fail")
            elif command == "PrintBattleLog":
                out.extend(self.log)
            elif command == "BattleStatus":
                out.append(
                    {1: "heroes are winning", -1: "enemies are winning"}.get(
                        self.result(), "tie"
                    )
                )
        return out


def run_program(text: str) -> str:
    """Run a whole scenario given as text and return what it prints."""
    it = iter(text.split())
    suit_count, hero_count, enemy_count = _number(it), _number(it), _number(it)
    battle = Battle()
    for _ in range(suit_count):
        battle.add_suit(Suit(*(_number(it) for _ in range(4))))

    out: list[str] = []
    for index in range(hero_count + enemy_count):
        name, strength = _word(it), _number(it)
        if not battle.suits:
            out.append(f"{name} is out of fight")
            continue
        avenger = Avenger(name, battle.take_suit(), strength)
        if index < hero_count:
            battle.add_hero(avenger)
        else:
            battle.add_enemy(avenger)

    if next(it, None) == "BattleBegin":
        out.extend(battle.run(it))
    return "".join(line + "\n" for line in out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run a battle scenario read from stdin.")
    parser.parse_args(argv)
    sys.stdout.write(run_program(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())