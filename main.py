"""
2D Particle Field
=================

An interactive field of particles pushed around by the mouse.

Controls:
    - Left mouse (hold): Attract particles to the cursor
    - Right mouse (click): Repel particles from the cursor
    - Middle mouse (hold): Orbit particles around the cursor
    - H: Toggle HUD
    - ESC: Back to the main menu
"""

import argparse

from core import Application


def main():
    parser = argparse.ArgumentParser(description="Interactive 2D particle field")
    parser.add_argument("--width", type=int, help="Window width in pixels")
    parser.add_argument("--height", type=int, help="Window height in pixels")
    parser.add_argument("--interval", "-i", type=float, help="Spawn grid spacing (default 5.0)")
    parser.add_argument("--shape", choices=["triangle", "point"], help="Particle draw shape")
    parser.add_argument("--fullscreen", action="store_true", help="Start fullscreen")
    args = parser.parse_args()
    
    app = Application(
        width=args.width,
        height=args.height,
        interval=args.interval,
        shape=args.shape,
        fullscreen=args.fullscreen,
    )
    app.run()


if __name__ == "__main__":
    main()
