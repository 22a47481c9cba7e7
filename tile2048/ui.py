"""Tk window for playing 2048 and browsing the leaderboard."""

from __future__ import annotations

import argparse

from .controller import MAX_SIZE, MIN_SIZE, AppController, Notice, Screen, Settings
from .game import EMPTY, Direction
from .leaderboard import DEFAULT_HOST, DEFAULT_PORT, LeaderboardClient
from .protocol import LeaderboardItem

CELL_AREA = 200
POLL_INTERVAL_MS = 100
DEFAULT_STYLE = ("lightgray", "black")

_TILE_STYLES = {
    2: ("#fbfced", "black"),
    4: ("#ecefc6", "black"),
    8: ("#ffb296", "black"),
    16: ("#ff7373", "black"),
    32: ("#f6546a", "white"),
    64: ("#8b0000", "white"),
    128: ("#794044", "white"),
    256: ("#31698a", "white"),
    512: ("#297A76", "white"),
    1024: ("#2D8A68", "white"),
    2048: ("#1C9F4E", "white"),
}

_KEY_DIRECTIONS = {
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
    "Up": Direction.UP,
    "Down": Direction.DOWN,
}


def cell_style(value: int) -> tuple[str, str]:
    """Return the background and text colours for a tile value."""
    return _TILE_STYLES.get(value, DEFAULT_STYLE)


def cell_size(rows: int, cols: int) -> tuple[int, int]:
    """Return the pixel width and height of one board cell."""
    return CELL_AREA // rows, CELL_AREA // cols


class MainWindow:
    """All screens of the application inside one Tk root window."""

    def __init__(self, root, controller: AppController) -> None:
        import tkinter as tk
        from tkinter import messagebox, ttk

        self._tk = tk
        self._ttk = ttk
        self._messagebox = messagebox
        self.root = root
        self.controller = controller
        root.title("2048 Game")
        controller.on_notice = self._show_notice

        self._frames = {
            Screen.MAIN_MENU: self._build_main_menu(),
            Screen.SETTINGS: self._build_settings(),
            Screen.LEADERBOARD: self._build_leaderboard(),
        }
        self._cells: dict[tuple[int, int], object] = {}
        self._frames[Screen.GAME] = self._build_game_view()

        leaderboard = controller.leaderboard
        if isinstance(leaderboard, LeaderboardClient):
            leaderboard.on_leaderboard = self._populate_leaderboard

        root.bind("<Key>", self.on_key)
        self.show_screen(controller.screen)
        self.root.after(POLL_INTERVAL_MS, self._poll)

    def _build_main_menu(self):
        tk = self._tk
        frame = tk.Frame(self.root, width=240, height=320)
        frame.pack_propagate(False)
        tk.Label(frame, text="2048 Game", font=("TkDefaultFont", 24, "bold")).pack(
            fill="x", pady=8
        )
        for text, command in (
            ("Start Game", self._on_start),
            ("Leaderboard", self._on_open_leaderboard),
            ("Settings", self._on_open_settings),
            ("Quit", self.root.destroy),
        ):
            tk.Button(frame, text=text, command=command).pack(fill="x", pady=4)
        return frame

    def _build_settings(self):
        tk = self._tk
        frame = tk.Frame(self.root)
        tk.Label(frame, text="Settings", font=("TkDefaultFont", 12, "bold")).pack(fill="x")
        self._name_var = tk.StringVar(value="player")
        self._rows_var = tk.StringVar(value=str(self.controller.settings.rows))
        self._cols_var = tk.StringVar(value=str(self.controller.settings.cols))

        name_row = tk.Frame(frame)
        tk.Label(name_row, text="Name").pack(side="left")
        tk.Entry(name_row, textvariable=self._name_var).pack(side="left", fill="x", expand=True)
        name_row.pack(fill="x")

        for label, variable in (("Rows:", self._rows_var), ("Columns:", self._cols_var)):
            line = tk.Frame(frame)
            tk.Label(line, text=label).pack(side="left")
            tk.Spinbox(
                line, from_=MIN_SIZE, to=MAX_SIZE, textvariable=variable, width=5
            ).pack(side="left")
            line.pack(fill="x")

        tk.Button(frame, text="Confirm", command=self._on_confirm_settings).pack(fill="x")
        return frame

    def _build_leaderboard(self):
        tk, ttk = self._tk, self._ttk
        frame = tk.Frame(self.root)
        tk.Label(frame, text="Leaderboard", font=("TkDefaultFont", 12, "bold")).pack(fill="x")
        self._table = ttk.Treeview(frame, columns=("name", "score"), show="headings")
        self._table.heading("name", text="Player Name")
        self._table.heading("score", text="Score")
        self._table.column("score", anchor="e")
        self._table.pack(fill="both", expand=True)
        tk.Button(frame, text="Back", command=self._on_back).pack(fill="x")
        return frame

    def _build_game_view(self):
        tk = self._tk
        game = self.controller.game
        frame = tk.Frame(self.root)

        controls = tk.Frame(frame)
        tk.Label(controls, text="Score:", anchor="e").pack(side="left", fill="x", expand=True)
        self._score_value = tk.Label(controls, text="0", anchor="w")
        self._score_value.pack(side="left", fill="x", expand=True)
        tk.Button(controls, text="Reset", takefocus=0, command=self._on_reset).pack(side="left")
        tk.Button(controls, text="Back", takefocus=0, command=self._on_back).pack(side="left")
        controls.grid(row=0, column=0, columnspan=game.cols, sticky="ew")

        width, height = cell_size(game.rows, game.cols)
        self._cells = {}
        for row in range(game.rows):
            for col in range(game.cols):
                holder = tk.Frame(
                    frame,
                    width=width,
                    height=height,
                    highlightbackground="#ccc",
                    highlightthickness=1,
                )
                holder.pack_propagate(False)
                label = tk.Label(holder, text="", bg=DEFAULT_STYLE[0], fg=DEFAULT_STYLE[1])
                label.pack(fill="both", expand=True)
                holder.grid(row=row + 1, column=col)
                self._cells[(row, col)] = label
        return frame

    def _rebuild_game_view(self) -> None:
        self._frames[Screen.GAME].destroy()
        self._frames[Screen.GAME] = self._build_game_view()

    def show_screen(self, screen: Screen) -> None:
        """Show the frame for ``screen`` and hide the others."""
        for frame in self._frames.values():
            frame.pack_forget()
        self._frames[screen].pack(fill="both", expand=True)

    def render_board(self) -> None:
        """Copy the game's cells and score into the board widgets."""
        game = self.controller.game
        for (row, col), label in self._cells.items():
            value = game.get_cell(row, col)
            background, foreground = cell_style(value)
            label.config(
                text="" if value == EMPTY else str(value), bg=background, fg=foreground
            )
        self._score_value.config(text=str(game.score))

    def on_key(self, event) -> None:
        """Slide the tiles when an arrow key is pressed during a game."""
        direction = _KEY_DIRECTIONS.get(getattr(event, "keysym", ""))
        if direction is None or self.controller.screen is not Screen.GAME:
            return
        self.controller.handle_move(direction)
        self.render_board()
        self.show_screen(self.controller.screen)

    def _show_notice(self, notice: Notice) -> None:
        show = self._messagebox.showwarning if notice.warning else self._messagebox.showinfo
        show(notice.title, notice.message, parent=self.root)

    def _populate_leaderboard(self, items: list[LeaderboardItem]) -> None:
        self._table.delete(*self._table.get_children())
        for item in items:
            self._table.insert("", "end", values=(item.name, item.score))

    def _poll(self) -> None:
        leaderboard = self.controller.leaderboard
        if isinstance(leaderboard, LeaderboardClient):
            try:
                leaderboard.poll()
            except OSError:
                leaderboard.close()
        self.root.after(POLL_INTERVAL_MS, self._poll)

    def _on_start(self) -> None:
        self.controller.start_game()
        self.render_board()
        self.show_screen(self.controller.screen)

    def _on_reset(self) -> None:
        self.controller.reset_game()
        self.render_board()
        self.show_screen(self.controller.screen)

    def _on_open_settings(self) -> None:
        settings = self.controller.open_settings()
        self._rows_var.set(str(settings.rows))
        self._cols_var.set(str(settings.cols))
        self.show_screen(self.controller.screen)

    def _on_confirm_settings(self) -> None:
        current = self.controller.settings
        try:
            rows = int(self._rows_var.get())
        except ValueError:
            rows = current.rows
        try:
            cols = int(self._cols_var.get())
        except ValueError:
            cols = current.cols
        self.controller.confirm_settings(rows, cols, self._name_var.get())
        self._rebuild_game_view()
        self.show_screen(self.controller.screen)

    def _on_open_leaderboard(self) -> None:
        self.controller.open_leaderboard()
        self._populate_leaderboard(self.controller.leaderboard_items)
        self.show_screen(self.controller.screen)

    def _on_back(self) -> None:
        self.controller.back()
        self.show_screen(self.controller.screen)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    import tkinter as tk

    parser = argparse.ArgumentParser(description="Play 2048.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="leaderboard server host")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="leaderboard server port")
    args = parser.parse_args(argv)

    root = tk.Tk()
    with LeaderboardClient(args.host, args.port) as client:
        controller = AppController(client)
        MainWindow(root, controller)
        root.mainloop()
    return 0


_ = Settings