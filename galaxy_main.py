"""
Galaxy Maker
============

An interactive 2D gravitational sandbox: place stars with the mouse and
watch them evolve under exact pairwise gravity.

Controls:
    - Click: Add one star at rest
    - Drag: Add a stream of stars moving sideways to the drag
    - SPACE: Pause/Resume simulation
    - C: Clear all stars
    - S: Save the current frame as PNG
    - R: Reset mass, gravity and time step
    - [ / ]: Decrease/Increase mass of new stars
    - UP/DOWN: Increase/Decrease gravity
    - LEFT/RIGHT: Decrease/Increase time step
    - 1-9: Select galaxy preset
    - G: Spawn the selected galaxy at the pointer
    - H: Toggle help text
    - ESC: Quit
"""

import argparse

from tools.presets import PRESETS, print_preset_menu


def main():
    parser = argparse.ArgumentParser(
        description="Interactive 2D galaxy maker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python galaxy_main.py                           # Empty sky
  python galaxy_main.py --preset milky_way        # Start with a galaxy
  python galaxy_main.py --seed 42 --width 1920 --height 1080
        """
    )
    parser.add_argument("--width", type=int, default=None, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Window height in pixels")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible star placement")
    parser.add_argument("--preset", choices=sorted(PRESETS), default=None,
                        help="Spawn this galaxy preset at start-up")
    parser.add_argument("--assets", default=None, help="Directory holding star1.png ... star5.png")
    parser.add_argument("--list-presets", action="store_true", help="List galaxy presets and exit")

    args = parser.parse_args()

    if args.list_presets:
        print_preset_menu()
        return

    # Deferred so --help and --list-presets work without a display
    from core.application import Application

    app = Application(width=args.width, height=args.height, seed=args.seed, asset_dir=args.assets)
    if args.preset:
        app.spawn_galaxy(args.preset, center=app.settings.center)
    app.run()


if __name__ == "__main__":
    main()
