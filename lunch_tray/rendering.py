"""Rendering helpers for the screen panes."""

from __future__ import annotations

from rich.text import Text

from lunch_tray.constant import APP_TITLE, START_BLURB
from lunch_tray.pricing import format_price
from lunch_tray.models import LunchTrayScreen, MenuCategory, MenuItem, OrderUiState

_CATEGORY_LABELS: dict[MenuCategory, str] = {
    MenuCategory.ENTREE: "Entree",
    MenuCategory.SIDE_DISH: "Side Dish",
    MenuCategory.ACCOMPANIMENT: "Accompaniment",
}


def badge_style(screen: LunchTrayScreen) -> str:
    """Return a consistent badge style for the step indicator."""
    if screen is LunchTrayScreen.CHECKOUT:
        return "bold #ffffff on #2f6db5"
    if screen is LunchTrayScreen.START:
        return "bold #ffffff on #b23a48"
    return "bold #0b1f0f on #5fbf72"


def format_screen_title(screen: LunchTrayScreen, can_navigate_back: bool) -> Text:
    """Render the title bar text, with a back marker when going up is possible."""
    text = Text()
    if can_navigate_back:
        text.append("← ", style="bold")
    step = list(LunchTrayScreen).index(screen) + 1
    text.append(f" {step}/{len(LunchTrayScreen)} ", style=badge_style(screen))
    text.append(f" {screen.title}", style="bold")
    return text


def format_start() -> Text:
    text = Text()
    text.append(APP_TITLE, style="bold")
    text.append(f"\n\n{START_BLURB}")
    return text


def format_menu_list(items: list[MenuItem], cursor_index: int, selected: MenuItem | None) -> Text:
    """Render menu options as radio rows with the cursor pointer."""
    lines = Text()
    for idx, item in enumerate(items):
        if idx > 0:
            lines.append("\n\n")
        pointer = "➤ " if idx == cursor_index else "  "
        radio = "(•)" if item == selected else "( )"
        name_style = "bold" if item == selected else ""
        lines.append(f"{pointer}{radio} ")
        lines.append(item.name, style=name_style)
        lines.append(f"  {item.formatted_price()}")
        lines.append(f"\n      {item.description}", style="dim")
    return lines


def format_order_summary(state: OrderUiState) -> Text:
    """Render the checkout review: one line per slot, then the amounts."""
    text = Text()
    text.append("Order Summary", style="bold")
    slots = (
        (MenuCategory.ENTREE, state.entree),
        (MenuCategory.SIDE_DISH, state.side_dish),
        (MenuCategory.ACCOMPANIMENT, state.accompaniment),
    )
    for category, item in slots:
        text.append(f"\n{_CATEGORY_LABELS[category]}: ")
        if item is None:
            text.append("None selected", style="dim")
        else:
            text.append(f"{item.name}  {item.formatted_price()}")

    text.append("\n\n")
    text.append(f"Subtotal: {format_price(state.item_total_price)}")
    text.append(f"\nTax: {format_price(state.order_tax)}")
    text.append(f"\nTotal: {format_price(state.order_total_price)}", style="bold")
    return text


def help_text_for(screen: LunchTrayScreen, can_go_next: bool = False) -> str:
    """Key help for the current screen; N is offered once a choice is recorded."""
    if screen is LunchTrayScreen.START:
        return "Enter start order. Ctrl+Q quit."
    if screen is LunchTrayScreen.CHECKOUT:
        return "Enter submit. C cancel. B/← back."
    keep_hint = ", N keep choice + next" if can_go_next else ""
    return f"J/K/↑/↓ move, Space select, Enter select + next{keep_hint}. C cancel. B/← back."
