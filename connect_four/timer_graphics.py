"""Drawing of the timer window: clock face, needles and player clocks.

Positions are given in a coordinate system centred on the window, running
from -1 to 1 on both axes with y growing downwards.
"""

import math
from functools import lru_cache

import pygame

WINDOW_MIDDLE = 0.0

X_TIMER_PLAYER_1 = -0.8
X_TIMER_PLAYER_2 = 0.2
Y_TIMER_PLAYERS = 0.7

WIDTH_TIMER_PLAYERS = 0.6
HEIGHT_TIMER_PLAYERS = 0.25

MARGIN_SELECTION_PLAYER = 0.03

TIMER_RADIUS = 0.9
NEEDLES_RADIUS = TIMER_RADIUS - 0.08

DIGITS_SIZE = 0.15
NAMES_SIZE = 0.12
TIMES_SIZE = 0.3

LIGHTGRAY = (199, 199, 199)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
SELECTION_COLOR = (25, 116, 44)
FACE_COLOR = (163, 207, 207)

NEEDLE_WIDTH = 0.025


def to_pixels(surface: pygame.Surface, x: float, y: float) -> tuple[int, int]:
    """Convert centred coordinates to the pixel position on ``surface``."""
    width, height = surface.get_size()
    return round((x + 1.0) * width / 2.0), round((y + 1.0) * height / 2.0)


def needle_end(value: float, radius: float) -> tuple[float, float]:
    """End point of a needle of ``radius`` showing ``value`` out of sixty."""
    angle = value * (math.pi / 30.0) - math.pi / 2.0
    return radius * math.cos(angle), radius * math.sin(angle)


def _length(surface: pygame.Surface, value: float) -> float:
    return value * min(surface.get_size()) / 2.0


@lru_cache(maxsize=None)
def _font(pixel_size: int) -> pygame.font.Font:
    pygame.font.init()
    return pygame.font.Font(None, pixel_size)


def _draw_text(surface: pygame.Surface, text: str, x: float, y: float, size: float) -> None:
    # (x, y) is the start of the baseline.
    font = _font(max(1, round(size * surface.get_height() / 2.0)))
    image = font.render(text, True, BLACK)
    left, baseline = to_pixels(surface, x, y)
    surface.blit(image, (left, baseline - font.get_ascent()))


def _draw_rect(surface: pygame.Surface, x: float, y: float, w: float, h: float, color) -> None:
    left, top = to_pixels(surface, x, y)
    right, bottom = to_pixels(surface, x + w, y + h)
    pygame.draw.rect(surface, color, pygame.Rect(left, top, right - left, bottom - top))


def _format_value(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


class TimerGraphics:
    """Draws the timer window for two named players."""

    def __init__(self, name_player_1: str, name_player_2: str) -> None:
        pygame.font.init()
        self.name_player_1 = name_player_1
        self.name_player_2 = name_player_2

    def update_window(
        self,
        surface: pygame.Surface,
        p_1_min: float,
        p_1_sec: float,
        p_2_min: float,
        p_2_sec: float,
        id_current_player: int,
    ) -> None:
        """Redraw the whole window for the given clocks and running player."""
        display_bg(surface)
        display_selection_player(surface, id_current_player)
        self.display_players(surface, p_1_min, p_1_sec, p_2_min, p_2_sec)
        if id_current_player == 1:
            display_needles(surface, p_1_sec, p_1_min)
        else:
            display_needles(surface, p_2_sec, p_2_min)

    def display_players(
        self,
        surface: pygame.Surface,
        player_1_minutes: float,
        player_1_seconds: float,
        player_2_minutes: float,
        player_2_seconds: float,
    ) -> None:
        """Draw each player's name and remaining time as minutes:seconds."""
        players = (
            ("P1:", -0.95, -0.78, self.name_player_1, X_TIMER_PLAYER_1,
             player_1_minutes, player_1_seconds),
            ("P2:", 0.05, 0.22, self.name_player_2, X_TIMER_PLAYER_2,
             player_2_minutes, player_2_seconds),
        )
        name_y = Y_TIMER_PLAYERS - 0.05
        time_y = Y_TIMER_PLAYERS + HEIGHT_TIMER_PLAYERS * 4.0 / 5.0
        for label, label_x, name_x, name, box_x, minutes, seconds in players:
            _draw_text(surface, label, label_x, name_y, NAMES_SIZE)
            _draw_text(surface, name, name_x, name_y, NAMES_SIZE)
            _draw_rect(surface, box_x, Y_TIMER_PLAYERS,
                       WIDTH_TIMER_PLAYERS, HEIGHT_TIMER_PLAYERS, WHITE)
            _draw_text(surface, _format_value(minutes), box_x, time_y, TIMES_SIZE)
            _draw_text(surface, ":", box_x + WIDTH_TIMER_PLAYERS * 2.0 / 5.0,
                       time_y, TIMES_SIZE)
            _draw_text(surface, _format_value(seconds),
                       box_x + WIDTH_TIMER_PLAYERS * 4.0 / 7.0, time_y, TIMES_SIZE)


def display_bg(surface: pygame.Surface) -> None:
    """Clear the window and draw the numbers of the clock face."""
    radius = 0.55
    half = radius / 2.0
    three_quarter = radius * 150.0 / 180.0
    step = 0.03

    surface.fill(LIGHTGRAY)
    digits = (
        ("1", half - step, -three_quarter + step),
        ("2", three_quarter - step, -half + step),
        ("3", radius - step * 2.0, WINDOW_MIDDLE),
        ("4", three_quarter - step, half + step),
        ("5", half - step, three_quarter + step),
        ("6", WINDOW_MIDDLE - step, radius + step),
        ("7", -half - step, three_quarter + step),
        ("8", -three_quarter - step, half + step),
        ("9", -radius - step, WINDOW_MIDDLE + step),
        ("10", -three_quarter - step * 3.0, -half + step),
        ("11", -half - step * 2.0, -three_quarter + step),
        ("12", WINDOW_MIDDLE - step * 2.0, -radius + step),
    )
    for text, x, y in digits:
        _draw_text(surface, text, x, y, DIGITS_SIZE)


def display_selection_player(surface: pygame.Surface, current_player: int) -> None:
    """Frame the clock of the running player."""
    box_x = X_TIMER_PLAYER_1 if current_player == 1 else X_TIMER_PLAYER_2
    _draw_rect(
        surface,
        box_x - MARGIN_SELECTION_PLAYER,
        Y_TIMER_PLAYERS - MARGIN_SELECTION_PLAYER,
        WIDTH_TIMER_PLAYERS + MARGIN_SELECTION_PLAYER * 2.0,
        HEIGHT_TIMER_PLAYERS + MARGIN_SELECTION_PLAYER * 2.0,
        SELECTION_COLOR,
    )


def display_needles(
    surface: pygame.Surface, current_player_seconds: float, current_player_minutes: float
) -> None:
    """Draw the clock face with its seconds and minutes needles."""
    centre = to_pixels(surface, WINDOW_MIDDLE, WINDOW_MIDDLE)
    pygame.draw.circle(surface, BLACK, centre, _length(surface, (TIMER_RADIUS + 0.03) / 2.0))
    pygame.draw.circle(surface, FACE_COLOR, centre, _length(surface, TIMER_RADIUS / 2.0))
    pygame.draw.circle(surface, BLACK, centre, _length(surface, 0.02))

    width = max(1, round(_length(surface, NEEDLE_WIDTH)))
    for value, radius in (
        (current_player_seconds, NEEDLES_RADIUS / 2.0),
        (current_player_minutes, NEEDLES_RADIUS / 4.0),
    ):
        x, y = needle_end(value, radius)
        pygame.draw.line(surface, BLACK, centre, to_pixels(surface, x, y), width)