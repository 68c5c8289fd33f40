"""A short interactive text adventure: Sanji hunts for rare ingredients."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable, Sequence
from enum import Enum

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class Ending(Enum):
    """The ways an adventure can finish."""

    EXPLOSIVE_FRUIT = "explosive_fruit"
    MARINE_TRAP = "marine_trap"
    POISONOUS_SPIDERS = "poisonous_spiders"
    BROKEN_PAN = "broken_pan"
    SUCCESS = "success"


def parse_choice(text: str) -> int | None:
    """Read a leading integer the way ``%d`` does; ``None`` if there is none."""
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else None


class Adventure:
    """One play-through driven by injectable input, output and delay functions."""

    def __init__(
        self,
        read_line: Callable[[], str],
        write: Callable[[str], object],
        pause: Callable[[float], object],
    ) -> None:
        self.read_line = read_line
        self.write = write
        self.pause = pause
        self.correct_answers = 0

    def _say(self, *lines: str) -> None:
        for line in lines:
            self.write(line + "\n")

    def ask(self, prompt: str, options: Sequence[str]) -> int | None:
        """Show a prompt with numbered options and return the player's choice."""
        self._say(prompt)
        for number, option in enumerate(options, start=1):
            self._say(f"{number} - {option}")
        numbers = " ou ".join(str(n) for n in range(1, len(options) + 1))
        self.write(f"Escolha ({numbers}): ")
        return parse_choice(self.read_line())

    def play(self) -> Ending:
        """Run the story from the start and return how it ended."""
        self.correct_answers = 0
        self._say(
            "",
            "========================================",
            "    AVENTURA DO SANJI - ONE PIECE",
            "========================================",
            "",
        )
        self.pause(1)
        self._say(
            "Sanji, o cozinheiro dos Piratas do Chapéu de Palha,",
            "está em uma nova ilha em busca de ingredientes raros!",
            "",
        )
        self.pause(2)

        choice = self.ask(
            "Sanji encontra dois ingredientes promissores:",
            [
                "Cogumelos bioluminescentes",
                "Frutas do tamanho de melões com casca espinhosa",
            ],
        )
        if choice != 1:
            self._say(
                "",
                "As frutas são explosivas! Sanji quase se machuca.",
                "Fim da aventura. Zoro ri da sua desventura.",
            )
            return Ending.EXPLOSIVE_FRUIT

        self._say("", "Os cogumelos são raros e perfeitos para molhos!")
        choice = self.ask(
            "Ao coletá-los, Sanji ouve um barulho:",
            ["Investigar a origem do som", "Continuar coletando rapidamente"],
        )
        if choice != 1:
            self._say(
                "",
                "Era uma armadilha da Marinha! Sanji é capturado.",
                "Fim da aventura. Luffy terá que resgatá-lo!",
            )
            return Ending.MARINE_TRAP
        self._say("", "Era um cozinheiro ferido que compartilha uma receita secreta!")
        self.correct_answers += 1

        choice = self.ask(
            "\nNo caminho de volta, Sanji vê dois utensílios:",
            ["Uma frigideira de aço lendário", "Um chapéu de chef antigo"],
        )
        if choice != 1:
            self._say(
                "",
                "O chapéu estava infestado de aranhas venenosas!",
                "Fim da aventura. Sanji passa mal e perde os ingredientes.",
            )
            return Ending.POISONOUS_SPIDERS

        self._say("", "A frigideira pertenceu ao Chef Zeff! Item valioso!")
        choice = self.ask(
            "Após esse achado, Sanji deve:",
            ["Testar imediatamente a frigideira", "Levar para o navio com cuidado"],
        )
        if choice != 2:
            self._say(
                "",
                "A frigideira quebra ao ser usada sem preparo!",
                "Fim da aventura. Zeff ficaria decepcionado.",
            )
            return Ending.BROKEN_PAN
        self._say("", "Sanji preserva o artefato corretamente!")
        self.correct_answers += 1

        if self.correct_answers >= 2:
            self._say(
                "",
                "========================================",
                "   ★ MISSÃO CULINÁRIA BEM-SUCEDIDA! ★",
                "========================================",
                "",
                "Sanji retorna ao Thousand Sunny com:",
                "- Cogumelos bioluminescentes raros",
                "- Receita secreta do cozinheiro",
                "- Frigideira lendária do Chef Zeff",
                "",
                'Luffy: "SANJI! FAZ UM BANQUETE!"',
                'Zoro: "Até que enfas ele serve pra algo..."',
                'Nami: "Vendemos algum desses itens?" *sorrindo*',
            )
        return Ending.SUCCESS


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the adventure on the terminal. Command-line arguments are ignored."""
    Adventure(sys.stdin.readline, _write, time.sleep).play()
    return 0


if __name__ == "__main__":
    sys.exit(main())