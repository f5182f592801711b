
import pygame

CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE, pygame.K_r)

class GameOverDialog:
    """Modal panel shown while the engine reports game over."""
    def __init__(self):
        self.active=False

    def sync(self, snap):
        self.active=snap.game_over

    def handle(self, engine, e) -> bool:
        """Consume a key event while open; confirming restarts the game."""
        if not self.active or e.type!=pygame.KEYDOWN: return False
        if e.key in CONFIRM_KEYS:
            engine.reset()
            self.active=False
        return True

    def draw(self, screen, font, big_font, w, h, score):
        if not self.active: return
        s=pygame.Surface((w,h),pygame.SRCALPHA); s.fill((0,0,0,160))
        screen.blit(s,(0,0))
        panel=pygame.Rect(0,0,min(w-40,320),180); panel.center=(w//2,h//2)
        pygame.draw.rect(screen,(17,24,39),panel)
        pygame.draw.rect(screen,(255,255,255),panel,2)
        lines=[
            (big_font,"Game Over",(255,220,220)),
            (font,f"Score: {score}",(255,255,255)),
            (font,"Enter: Play Again",(200,210,235)),
        ]
        y=panel.y+24
        for fnt,txt,col in lines:
            surf=fnt.render(txt,True,col)
            screen.blit(surf,surf.get_rect(midtop=(panel.centerx,y))); y+=surf.get_height()+18
