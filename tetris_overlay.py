import pygame
from tetris import Game
from tetris_layout import Dims

class Overlay:
    """Banner over the field: paused, or game over with the final score."""
    def __init__(self, big_font, font):
        self.big_font=big_font; self.font=font
        self.paused=False

    def toggle(self): self.paused=not self.paused

    def message(self, game: Game):
        if game.game_over: return "GAME OVER", f"Final score: {game.score.points}  (R to Restart)"
        if self.paused: return "PAUSED", "P to Resume"
        return None

    def draw(self,screen,game: Game,d: Dims):
        msg=self.message(game)
        if msg is None: return
        title,hint=msg
        s=pygame.Surface((d.board_w,120),pygame.SRCALPHA); s.fill((20,25,40,230))
        top=d.board_y+d.board_h//2-60
        screen.blit(s,(d.board_x,top))
        cx=d.board_x+d.board_w//2
        t=self.big_font.render(title,True,(255,220,220))
        screen.blit(t,t.get_rect(center=(cx,top+40)))
        h=self.font.render(hint,True,(200,210,235))
        screen.blit(h,h.get_rect(center=(cx,top+84)))
