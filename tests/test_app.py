from decimal import Decimal

from lunch_tray.data import ACCOMPANIMENT_MENU_ITEMS, ENTREE_MENU_ITEMS, SIDE_DISH_MENU_ITEMS
from lunch_tray.flow import OrderFlow
from lunch_tray.lunch_tray_app import LunchTrayApp
from lunch_tray.models import LunchTrayScreen, OrderUiState
from lunch_tray.order import OrderSession

S = LunchTrayScreen


def make_app():
    return LunchTrayApp(OrderFlow(session=OrderSession(tax_rate=Decimal("0.08"))))


async def test_enter_walks_to_checkout_with_first_items():
    app = make_app()
    async with app.run_test() as pilot:
        assert app.flow.screen is S.START
        assert app.sub_title == "Start Order"

        await pilot.press("enter")
        assert app.flow.screen is S.ENTREE
        assert app.sub_title == "Choose Entree"

        await pilot.press("enter", "enter", "enter")
        assert app.flow.screen is S.CHECKOUT
        assert app.flow.state.entree == ENTREE_MENU_ITEMS[0]
        assert app.flow.state.side_dish == SIDE_DISH_MENU_ITEMS[0]
        assert app.flow.state.accompaniment == ACCOMPANIMENT_MENU_ITEMS[0]


async def test_cursor_moves_pick_other_items():
    app = make_app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "down", "down", "enter")
        assert app.flow.state.entree == ENTREE_MENU_ITEMS[2]

        await pilot.press("up", "enter")
        assert app.flow.state.side_dish == SIDE_DISH_MENU_ITEMS[-1]

        await pilot.press("j", "k", "j", "enter")
        assert app.flow.state.accompaniment == ACCOMPANIMENT_MENU_ITEMS[1]
        assert app.flow.state.item_total_price == Decimal("8.00")


async def test_space_selects_without_advancing():
    app = make_app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "down", "space")
        assert app.flow.screen is S.ENTREE
        assert app.flow.state.entree == ENTREE_MENU_ITEMS[1]


async def test_submit_resets_and_reports_total():
    app = make_app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "enter", "enter", "enter", "enter")
        assert app.flow.screen is S.START
        assert app.flow.state == OrderUiState()
        assert app.system_status == "Order submitted: $10.80"


async def test_cancel_returns_to_start_with_empty_order():
    app = make_app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "enter", "c")
        assert app.flow.screen is S.START
        assert app.flow.state == OrderUiState()
        assert app.system_status == "Order cancelled"


async def test_back_keeps_selection_and_cursor():
    app = make_app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "down", "down", "down", "enter")
        assert app.flow.screen is S.SIDE_DISH

        await pilot.press("b")
        assert app.flow.screen is S.ENTREE
        assert app.flow.state.entree == ENTREE_MENU_ITEMS[3]
        assert app.cursor_index == 3

        await pilot.press("left")
        assert app.flow.screen is S.START
        assert app.flow.state.entree == ENTREE_MENU_ITEMS[3]


async def test_keys_without_an_edge_are_ignored_on_start():
    app = make_app()
    async with app.run_test() as pilot:
        await pilot.press("c", "b", "space", "down")
        assert app.flow.screen is S.START
        assert app.flow.state == OrderUiState()


async def test_keep_choice_advances_only_with_a_selection():
    app = make_app()
    async with app.run_test() as pilot:
        await pilot.press("enter", "n")
        assert app.flow.screen is S.ENTREE
        assert app.system_status.startswith("Select an item before continuing")

        await pilot.press("down", "space", "up", "n")
        assert app.flow.screen is S.SIDE_DISH
        assert app.flow.state.entree == ENTREE_MENU_ITEMS[1]


async def test_keep_choice_ignored_outside_menu_screens():
    app = make_app()
    async with app.run_test() as pilot:
        await pilot.press("n")
        assert app.flow.screen is S.START
        assert app.system_status == ""
