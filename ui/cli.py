# # Command-line interface (text-based play)

from game.errors import InvalidGuessError
from game.pegs import CodeColor
from game.ruleset import DEFAULT_RULES, configure
from game.scoring import feedback_counts
from game.session import start_game


HELP = (
    "Type colors as letters (e.g. RBGY) to fill the row, then 'confirm'\n"
    "(or an empty line) to score it.\n"
    "Commands: 'back' removes the last color, 'new' starts a new game,\n"
    "'settings SLOTS COLORS ROWS yes|no' changes the rules for the next game,\n"
    "'exit' quits.\n"
)


def parse_guess(text, config):
    """
    Turn letters like 'RBGY' into colors.

    Args:
        text (str): The letters typed by the player; spaces are ignored.
        config (GameConfig): The active config.

    Returns:
        list[CodeColor]: The parsed colors.

    Raises:
        InvalidGuessError: If a letter is not a color in play.
    """
    colors = []
    for symbol in text.replace(" ", ""):
        try:
            color = CodeColor.from_symbol(symbol)
        except ValueError:
            color = None
        if color is None or color not in config.colors:
            allowed = ", ".join(c.symbol for c in config.colors)
            raise InvalidGuessError(f"Invalid color '{symbol}'. Allowed: {allowed}.")
        colors.append(color)
    return colors


def check_limits(slots, colors):
    """
    Check slot and color counts against the ranges the settings menu offers.

    Raises:
        ValueError: If a count is out of range.
    """
    limits = DEFAULT_RULES["limits"]
    for name, value in (("slot_count", slots), ("color_count", colors)):
        low, high = limits[name]
        if not low <= value <= high:
            raise ValueError(f"{name} must be between {low} and {high}.")


def parse_settings(args):
    """
    Parse 'SLOTS COLORS ROWS yes|no' into a config, within the menu limits.

    Raises:
        ValueError: If the arguments are malformed or out of range.
    """
    if len(args) != 4:
        raise ValueError("Usage: settings SLOTS COLORS ROWS yes|no")
    slots, colors, rows = (int(a) for a in args[:3])
    check_limits(slots, colors)
    if args[3].lower() not in ("yes", "no"):
        raise ValueError("Repeating colors must be 'yes' or 'no'.")
    return configure(slots, colors, args[3].lower() == "yes", rows)


def describe(config):
    """Footer line describing the current rules."""
    return (
        f"Repeating colors: {'Yes' if config.allow_repeats else 'No'}"
        f"\tSlots: {config.slot_count}\tColors: {config.color_count}"
        f"\tRows: {config.num_rows}"
    )


def render_board(session):
    """Return a text representation of the board."""

    emoji = DEFAULT_RULES["display"]["emoji_map"]
    width = session.config.slot_count
    line = "+----" * (2 * width) + "+"

    lines = [line]
    for row in session.history:
        attempt_line = ""
        for c in row.guess:
            attempt_line += "| " + emoji[c.symbol] + " "
        for peg in row.feedback:
            attempt_line += "| " + emoji[peg.value] + " "
        for _ in range(width - len(row.feedback)):
            attempt_line += "|    "
        lines.append(attempt_line + "|")
        lines.append(line)

    if not session.finished:
        attempt_line = ""
        for c in session.active.get_guess():
            attempt_line += "| " + emoji[c.symbol] + " "
        for _ in range(2 * width - session.current_col):
            attempt_line += "|    "
        lines.append(attempt_line + "|")
        lines.append(line)
    return "\n".join(lines)


def gameloop(config=None, read=input):
    print("=== Mastermind CLI ===")
    print(HELP)

    config = config or configure()
    session = start_game(config)

    while True:
        if session.finished:
            if session.won:
                print("\nCongratulations! You WON!")
            else:
                print("\nYou lost. Better luck next time.")
            print(f"The secret code was: {session.hidden.as_string()}")
            print("Type 'new' to play again or 'exit' to quit.")
        else:
            print(f"\nAttempts left: {session.remaining_attempts()}")
            print(describe(session.config))
            print(
                f"Available colors: {', '.join(c.symbol for c in session.config.colors)}"
            )

        try:
            user_input = read("> ").strip()
        except EOFError:
            break
        command, *args = user_input.split() or [""]
        command = command.lower()

        # handle special commands
        if command == "exit":
            print("Exiting game.")
            break
        if command == "new":
            session = start_game(config)
            print("New game started.")
            continue
        if command == "settings":
            try:
                config = parse_settings(args)
            except ValueError as e:
                print(f"Invalid settings: {e}")
                continue
            if config.repeats_forced:
                print("Not enough colors for a pattern without repeats; repeating colors turned on.")
            print("New values for settings will only take effect once you start a new game.")
            continue
        if session.finished:
            continue

        # Place colors, or score a completed row
        try:
            if command == "back":
                session.back()
            elif command == "confirm" or (not user_input and session.active.is_complete):
                feedback = session.confirm()
                black, white = feedback_counts(feedback)
                print(f"Black: {black}  White: {white}")
            else:
                colors = parse_guess(user_input, session.config)
                if len(colors) > session.active.free_slots:
                    raise InvalidGuessError(
                        f"Only {session.active.free_slots} free slots left in this row."
                    )
                for color in colors:
                    session.place_color(color)
        except (ValueError, RuntimeError) as e:
            print(f"Invalid input: {e}")
            continue

        # Render current board
        print(render_board(session))

    print("\n=== Game Over ===")
