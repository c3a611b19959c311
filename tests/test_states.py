import pytest

from turtix.states import (
    AboutState,
    BLACK,
    ChooseMapState,
    ExitState,
    GREEN,
    Key,
    LoseState,
    MainMenuState,
    MenuContext,
    PauseState,
    PlayState,
    RED,
    StateId,
    WinState,
    YELLOW,
)


@pytest.fixture
def context():
    ctx = MenuContext()
    ctx.states[StateId.MAIN_MENU] = MainMenuState()
    return ctx


def test_main_menu_labels():
    menu = MainMenuState()
    assert [label.text for label in menu.labels] == ["PLAY", "ABOUT", "EXIT"]
    assert all(label.color == YELLOW for label in menu.labels)
    assert menu.selected == 0


def test_move_up_at_top_does_nothing():
    menu = MainMenuState()
    menu.move_up()
    assert menu.selected == 0
    assert menu.labels[0].color == YELLOW


def test_move_down_wraps_round():
    menu = MainMenuState()
    seen = []
    for _ in range(3):
        menu.move_down()
        seen.append(menu.selected)
    assert seen == [1, 2, 0]
    assert menu.labels[0].color == BLACK
    assert [label.color for label in menu.labels[1:]] == [YELLOW, YELLOW]


def test_move_up_after_down():
    menu = ChooseMapState()
    menu.move_down()
    menu.move_down()
    menu.move_up()
    assert menu.selected == 1
    assert menu.labels[1].color == BLACK
    assert menu.labels[2].color == YELLOW


def test_space_starts_play(context):
    menu = context.states[StateId.MAIN_MENU]
    nxt = menu.handle_key(Key.SPACE, context)
    assert isinstance(nxt, PlayState)
    assert context.states[StateId.PLAY] is nxt


def test_enter_on_play_option_opens_map_choice(context):
    menu = context.states[StateId.MAIN_MENU]
    nxt = menu.handle_key(Key.ENTER, context)
    assert isinstance(nxt, ChooseMapState)
    assert context.states[StateId.CHOOSE_MAP] is nxt


def test_enter_on_about_option(context):
    menu = context.states[StateId.MAIN_MENU]
    assert menu.handle_key(Key.DOWN, context) is menu
    nxt = menu.handle_key(Key.ENTER, context)
    assert isinstance(nxt, AboutState)
    assert context.open


def test_enter_on_exit_closes(context):
    menu = context.states[StateId.MAIN_MENU]
    menu.handle_key(Key.DOWN, context)
    menu.handle_key(Key.DOWN, context)
    nxt = menu.handle_key(Key.ENTER, context)
    assert isinstance(nxt, ExitState)
    assert context.states[StateId.EXIT] is nxt
    assert not context.open


@pytest.mark.parametrize("state_cls", [AboutState, ExitState, PlayState, ChooseMapState, WinState, LoseState])
def test_escape_returns_to_main_menu(context, state_cls):
    state = state_cls()
    assert state.handle_key(Key.ESCAPE, context) is context.states[StateId.MAIN_MENU]


def test_escape_without_main_menu_raises():
    with pytest.raises(LookupError):
        AboutState().handle_key(Key.ESCAPE, MenuContext())


def test_choose_map_enter_starts_play(context):
    old = PlayState()
    context.states[StateId.PLAY] = old
    nxt = ChooseMapState().handle_key(Key.ENTER, context)
    assert isinstance(nxt, PlayState)
    assert nxt is not old
    assert context.states[StateId.PLAY] is nxt


def test_play_win_and_lose_keys(context):
    play = PlayState()
    win = play.handle_key(Key.W, context)
    lose = play.handle_key(Key.L, context)
    assert isinstance(win, WinState) and context.states[StateId.WIN] is win
    assert isinstance(lose, LoseState) and context.states[StateId.LOSE] is lose


def test_pause_resume(context):
    pause = PauseState()
    assert pause.handle_key(Key.ESCAPE, context) is pause
    nxt = pause.handle_key(Key.R, context)
    assert isinstance(nxt, PlayState)
    assert context.states[StateId.PLAY] is nxt


def test_unhandled_key_keeps_state(context):
    about = AboutState()
    assert about.handle_key(Key.SPACE, context) is about
    assert about.update(context) is about


@pytest.mark.parametrize("state_cls,color", [(WinState, GREEN), (LoseState, RED)])
def test_result_update_shows_scores(context, state_cls, color):
    state = state_cls()
    state.gems = 3
    state.stars = 12
    assert state.update(context) is state
    assert [label.text for label in state.labels] == ["GEM : 3", "Star : 12"]
    assert all(label.color == color for label in state.labels)


def test_result_enter_closes_window(context):
    win = WinState()
    assert win.handle_key(Key.ENTER, context) is win
    assert not context.open


def test_background_paths():
    assert PlayState().background_path == "./assets/backgrounds/gamePlay.png"
    assert MainMenuState().background_path == "./assets/backgrounds/mainMenu.png"
    assert ExitState().background_path is None


def test_context_close():
    ctx = MenuContext()
    ctx.close()
    assert ctx.open is False