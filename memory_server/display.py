"""Terminal rendering for the memory board."""

from .models.game import Card

# ANSI colors
RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
DIM = "\033[2m"

CARD_BACK = "❓"


def pretty_card(card: Card) -> str:
    """Card face for display: symbol when visible, back otherwise."""
    if card.is_matched:
        return f"{GREEN}{card.content}{RESET}"
    if card.is_face_up:
        return f"{YELLOW}{card.content}{RESET}"
    return CARD_BACK


def format_board(cards: list[Card], columns: int = 4) -> str:
    """Lay cards out in a grid with their selection numbers."""
    lines = []
    for start in range(0, len(cards), columns):
        row = cards[start:start + columns]
        labels = "  ".join(f"{DIM}{start + i:>3}{RESET}" for i in range(len(row)))
        faces = "  ".join(f" {pretty_card(card)}" for card in row)
        lines.append(labels)
        lines.append(faces)
    return "\n".join(lines)


def format_status(score: int, moves: int, game_over: bool) -> str:
    """Score line shown under the board."""
    line = f"{BOLD}Score: {score}{RESET}   Moves: {moves}"
    if game_over:
        line += f"   {GREEN}{BOLD}Game Over!{RESET}"
    return line
