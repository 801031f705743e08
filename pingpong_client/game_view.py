# pingpong_client/game_view.py
import pygame

from pingpong_core.constants import WIDTH, HEIGHT, WHITE, BLACK, OVERLAY_ALPHA
from pingpong_core.engine import Snapshot


def draw_paddle(surf: pygame.Surface, snap: Snapshot):
    rect = pygame.Rect(int(snap.paddle_x), int(snap.paddle_y), snap.paddle_width, snap.paddle_height)
    pygame.draw.rect(surf, WHITE, rect)


def draw_ball(surf: pygame.Surface, snap: Snapshot):
    pygame.draw.circle(surf, WHITE, (int(snap.ball_x), int(snap.ball_y)), snap.ball_radius)


def draw_score(surf: pygame.Surface, font: pygame.font.Font, snap: Snapshot):
    img = font.render(f"Score: {snap.score}", True, WHITE)
    surf.blit(img, (20, 12))


def draw_end_overlay(surf: pygame.Surface, big_font: pygame.font.Font, font: pygame.font.Font, snap: Snapshot):
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, OVERLAY_ALPHA))
    surf.blit(overlay, (0, 0))

    title = big_font.render(snap.end_message, True, WHITE)
    surf.blit(title, title.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 60)))

    final = font.render(f"Final Score: {snap.score}", True, WHITE)
    surf.blit(final, final.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 10)))


def draw_frame(surf: pygame.Surface, big_font: pygame.font.Font, font: pygame.font.Font, snap: Snapshot):
    surf.fill(BLACK)
    draw_paddle(surf, snap)
    draw_ball(surf, snap)
    draw_score(surf, font, snap)
    if snap.is_over:
        draw_end_overlay(surf, big_font, font, snap)
