"""
Worked example: six seats, standard deck, Miss Scarlet's point of view.

Scarlet holds the White card, the Library and the Study. Every suggestion
of the game is asserted in turn order; the notepad is printed, then the
final (correct) accusation is recorded.

Run:
    python examples/worked_game.py
"""
import logging

from cluesat import ClueReasoner, Suggestion

logging.basicConfig(level=logging.INFO)


def suggest(cr, suggester, s, w, r, refuter=None, shown=None):
    cr.assert_suggestion_event(
        Suggestion.from_optional(suggester, s, w, r, refuter, shown)
    )


cr = ClueReasoner()
cr.assert_hand("sc", ["wh", "li", "st"])

suggest(cr, "sc", "sc", "ro", "lo", "mu", "sc")
suggest(cr, "mu", "pe", "pi", "di", "pe")
suggest(cr, "wh", "mu", "re", "ba", "pe")
suggest(cr, "gr", "wh", "kn", "ba", "pl")
suggest(cr, "pe", "gr", "ca", "di", "wh")
suggest(cr, "pl", "wh", "wr", "st", "sc", "wh")
suggest(cr, "sc", "pl", "ro", "co", "mu", "pl")
suggest(cr, "mu", "pe", "ro", "ba", "wh")
suggest(cr, "wh", "mu", "ca", "st", "gr")
suggest(cr, "gr", "pe", "kn", "di", "pe")
suggest(cr, "pe", "mu", "pi", "di", "pl")
suggest(cr, "pl", "gr", "kn", "co", "wh")
suggest(cr, "sc", "pe", "kn", "lo", "mu", "lo")
suggest(cr, "mu", "pe", "kn", "di", "wh")
suggest(cr, "wh", "pe", "wr", "ha", "gr")
suggest(cr, "gr", "wh", "pi", "co", "pl")
suggest(cr, "pe", "sc", "pi", "ha", "mu")
suggest(cr, "pl", "pe", "pi", "ba")
suggest(cr, "sc", "wh", "pi", "ha", "pe", "ha")
suggest(cr, "wh", "pe", "pi", "ha", "pe")
suggest(cr, "pe", "pe", "pi", "ha")
suggest(cr, "sc", "gr", "pi", "st", "wh", "gr")
suggest(cr, "mu", "pe", "pi", "ba", "pl")
suggest(cr, "wh", "pe", "pi", "st", "sc", "st")
suggest(cr, "gr", "wh", "pi", "st", "sc", "wh")
suggest(cr, "pe", "wh", "pi", "st", "sc", "wh")
suggest(cr, "pl", "pe", "pi", "ki", "gr")

print(cr.notepad())
print("Solution:", {c.value: card for c, card in cr.solution().items()})

cr.assert_accusation("sc", "pe", "pi", "bi", True)
