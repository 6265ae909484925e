import argparse
import logging
from typing import Optional

from audio import SoundPool
from core import UIRoot
from session import DecoyBarrage
from widgets import UIDialog, UITaskbar


def build_desktop(root: UIRoot, barrage: bool = True,
                  sound: Optional[SoundPool] = None) -> DecoyBarrage:
    decoys = DecoyBarrage(root, root.scheduler, sound=sound)

    root.add(UITaskbar())
    welcome = UIDialog.centered(root, 'Welcome', 'Press Okay to begin.',
                                on_dismiss=decoys.start if barrage else None)
    root.add(welcome)
    return decoys


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Retro desktop on a pygame canvas")
    parser.add_argument('--width', type=int, default=800)
    parser.add_argument('--height', type=int, default=600)
    parser.add_argument('--fps', type=int, default=60)
    parser.add_argument('--title', default='desktop')
    parser.add_argument('--sound', default=None, help="sound played for each decoy dialog")
    parser.add_argument('--no-barrage', dest='barrage', action='store_false',
                        help="dismissing the welcome dialog does nothing")
    parser.add_argument('--log-level', default='INFO')
    return parser.parse_args(argv)


# ─── Bootstrapper ───────────────────────────────────────────────────────────

def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    # engine
    rt = UIRoot(args.width, args.height, args.fps, args.title)

    # sound is loaded once the mixer exists
    rt.open()
    sound = SoundPool.load(args.sound) if args.sound else None

    build_desktop(rt, args.barrage, sound)
    rt.run()


if __name__ == "__main__":
    main()
