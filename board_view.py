import pygame

import config as cfg

TWO_PLAYER = "TWO_PLAYER"
VS_COMPUTER = "VS_COMPUTER"
RESET = "RESET"

BUTTON_LABELS = {
    TWO_PLAYER: "Two players",
    VS_COMPUTER: "Vs computer",
    RESET: "Reset",
}

BUTTON_MODES = {
    TWO_PLAYER: cfg.HUMAN_VS_HUMAN,
    VS_COMPUTER: cfg.HUMAN_VS_COMPUTER,
}


class BoardView:
    """
    Draws the board, status line and buttons from session state, and maps
    mouse positions back to cells and buttons.
    """

    def __init__(self, width=cfg.WIN_W, height=cfg.WIN_H):
        self.width = width
        self.height = height

        x0 = (width - cfg.BOARD_SIZE) // 2
        self.board_rect = pygame.Rect(x0, cfg.BOARD_TOP, cfg.BOARD_SIZE, cfg.BOARD_SIZE)
        self.cell = cfg.BOARD_SIZE / 3

        row_w = 3 * cfg.BUTTON_W + 2 * cfg.BUTTON_GAP
        bx = (width - row_w) // 2
        by = self.board_rect.bottom + 40
        self.buttons = {}
        for i, key in enumerate((TWO_PLAYER, VS_COMPUTER, RESET)):
            x = bx + i * (cfg.BUTTON_W + cfg.BUTTON_GAP)
            self.buttons[key] = pygame.Rect(x, by, cfg.BUTTON_W, cfg.BUTTON_H)

    def cell_rect(self, index) -> pygame.Rect:
        r, c = divmod(index, 3)
        size = int(self.cell)
        return pygame.Rect(
            int(self.board_rect.x + c * self.cell),
            int(self.board_rect.y + r * self.cell),
            size, size,
        )

    def cell_at(self, pos):
        if not self.board_rect.collidepoint(pos):
            return None
        x, y = pos
        col = min(2, int((x - self.board_rect.x) // self.cell))
        row = min(2, int((y - self.board_rect.y) // self.cell))
        return row * 3 + col

    def button_at(self, pos):
        for key, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return key
        return None

    def draw(self, screen, session, font_big, font_small):
        screen.fill(cfg.BG)

        self._highlight(screen, session.highlighted_cells())

        for i in range(1, 3):
            x = self.board_rect.x + i * self.cell
            y = self.board_rect.y + i * self.cell
            pygame.draw.line(screen, cfg.GRID,
                             (x, self.board_rect.top), (x, self.board_rect.bottom), 3)
            pygame.draw.line(screen, cfg.GRID,
                             (self.board_rect.left, y), (self.board_rect.right, y), 3)

        for index, symbol in enumerate(session.game.board):
            if symbol is not None:
                self._render_cell(screen, index, symbol, font_big)

        line = session.highlighted_cells()
        if line:
            color = cfg.X_COLOR if session.game.outcome.winner == "X" else cfg.O_COLOR
            p1 = self.cell_rect(line[0]).center
            p2 = self.cell_rect(line[-1]).center
            pygame.draw.line(screen, color, p1, p2, 8)

        st = font_small.render(session.status_text(), True, cfg.STATUS)
        screen.blit(st, (self.width / 2 - st.get_width() / 2, cfg.BOARD_TOP / 2 - st.get_height() / 2))

        self._draw_buttons(screen, session, font_small)

    def _render_cell(self, screen, index, symbol, font):
        color = cfg.X_COLOR if symbol == "X" else cfg.O_COLOR
        text = font.render(symbol, True, color)
        center = self.cell_rect(index).center
        screen.blit(text, (center[0] - text.get_width() / 2, center[1] - text.get_height() / 2))

    def _highlight(self, screen, indices):
        for index in indices:
            pygame.draw.rect(screen, cfg.WIN_FILL, self.cell_rect(index))

    def _draw_buttons(self, screen, session, font):
        for key, rect in self.buttons.items():
            # Only the mode buttons toggle; reset is never "active".
            active = session.started and BUTTON_MODES.get(key) == session.mode
            pygame.draw.rect(screen, cfg.BUTTON_ACTIVE if active else cfg.BUTTON, rect, border_radius=8)
            label = font.render(BUTTON_LABELS[key], True, cfg.TEXT)
            screen.blit(label, (rect.centerx - label.get_width() / 2, rect.centery - label.get_height() / 2))
