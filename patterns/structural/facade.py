"""
Facade pattern demo.

HomeTheaterFacade turns the multi-step start/stop sequences of the
amplifier, DVD player and projector into two calls.
"""

from typing import List


class _Device:
    def __init__(self, journal: List[str]):
        self.journal = journal

    def _say(self, message: str) -> None:
        print(message)
        self.journal.append(message)


class Amplifier(_Device):
    def on(self):
        self._say("Amp on")

    def set_volume(self, volume: int):
        self._say(f"Amp volume {volume}")

    def off(self):
        self._say("Amp off")


class DvdPlayer(_Device):
    def on(self):
        self._say("DVD on")

    def play(self, movie: str):
        self._say(f"DVD playing: {movie}")

    def stop(self):
        self._say("DVD stopped")

    def off(self):
        self._say("DVD off")


class Projector(_Device):
    def on(self):
        self._say("Projector on")

    def wide_screen_mode(self):
        self._say("Projector in widescreen")

    def off(self):
        self._say("Projector off")


class HomeTheaterFacade:
    def __init__(self, amp: Amplifier, dvd: DvdPlayer, projector: Projector):
        self.amp = amp
        self.dvd = dvd
        self.projector = projector

    def watch_movie(self, movie: str) -> None:
        """
        Start every device in order: projector, amplifier, then DVD.

        Args:
            movie: Title handed to the DVD player
        """
        print("Get ready to watch a movie...")
        self.projector.on()
        self.projector.wide_screen_mode()
        self.amp.on()
        self.amp.set_volume(5)
        self.dvd.on()
        self.dvd.play(movie)

    def end_movie(self) -> None:
        """Stop the DVD and switch everything off."""
        print("Shutting movie theater down...")
        self.dvd.stop()
        self.dvd.off()
        self.amp.off()
        self.projector.off()


def build_theater(journal: List[str]) -> HomeTheaterFacade:
    """Wire a facade whose devices all write to journal."""
    return HomeTheaterFacade(Amplifier(journal), DvdPlayer(journal), Projector(journal))


def main():
    theater = build_theater([])
    theater.watch_movie("Inception")
    print("--- later ---")
    theater.end_movie()


if __name__ == '__main__':
    main()
