"""
Galaxy Presets Library
======================

Named parameter sets for the spiral galaxy generator, spawnable from the
keyboard (1-9 selects, G spawns) or at start-up with ``--preset``.

Categories:
- CLASSIC: Well-behaved spirals that hold their shape for a while
- ARTISTIC: Visually striking arm configurations
- CHAOS: Heavy or crowded systems that fall apart quickly
"""

from typing import List, Optional, Tuple

from config import galaxy as config

PRESETS = {
    "grand_design": {
        "name": "Grand Design",
        "category": "CLASSIC",
        "description": "Two long, tightly wound arms around a modest bulge",
        "total_count": config.GALAXY["total_count"],
        "arm_count": 2,
        "arm_tightness": config.GALAXY["arm_tightness"],
        "arm_spread": config.GALAXY["arm_spread"],
        "bulge_fraction": config.GALAXY["bulge_fraction"],
        "max_radius": config.GALAXY["max_radius"],
    },
    "milky_way": {
        "name": "Milky Way",
        "category": "CLASSIC",
        "description": "Four arms with a bright central bulge",
        "total_count": 400,
        "arm_count": 4,
        "arm_tightness": 15.0,
        "arm_spread": 0.12,
        "bulge_fraction": 0.2,
        "max_radius": 260.0,
    },
    "whirlpool": {
        "name": "Whirlpool",
        "category": "ARTISTIC",
        "description": "Three very tight arms, small and fast",
        "total_count": 240,
        "arm_count": 3,
        "arm_tightness": 6.0,
        "arm_spread": 0.08,
        "bulge_fraction": 0.1,
        "max_radius": 160.0,
    },
    "pinwheel": {
        "name": "Pinwheel",
        "category": "ARTISTIC",
        "description": "Six loose, widely scattered arms",
        "total_count": 360,
        "arm_count": 6,
        "arm_tightness": 25.0,
        "arm_spread": 0.3,
        "bulge_fraction": 0.05,
        "max_radius": 300.0,
    },
    "dense_core": {
        "name": "Dense Core",
        "category": "CHAOS",
        "description": "Half the stars packed in the bulge",
        "total_count": 300,
        "arm_count": 2,
        "arm_tightness": 10.0,
        "arm_spread": 0.2,
        "bulge_fraction": 0.5,
        "max_radius": 200.0,
    },
}

GENERATOR_KEYS = (
    "total_count", "arm_count", "arm_tightness", "arm_spread", "bulge_fraction", "max_radius",
)


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def get_preset_list() -> List[Tuple[str, dict]]:
    """Get list of all presets sorted by category."""
    category_order = ["CLASSIC", "ARTISTIC", "CHAOS"]

    return sorted(
        PRESETS.items(),
        key=lambda x: (category_order.index(x[1]["category"]) if x[1]["category"] in category_order else 99, x[0])
    )


def print_preset_menu():
    """Print formatted preset menu."""
    presets = get_preset_list()
    current_category = None

    print("\n" + "=" * 70)
    print("  GALAXY PRESETS")
    print("=" * 70)

    for idx, (key, preset) in enumerate(presets):
        if preset["category"] != current_category:
            current_category = preset["category"]
            print(f"\n{'─' * 70}")
            print(f"  {current_category}")
            print(f"{'─' * 70}")

        print(f"  [{idx + 1}] {preset['name']:<16} {key:<14} {preset['total_count']:>4} stars | "
              f"{preset['arm_count']} arms")
        print(f"      {preset['description']}")

    print(f"\n{'=' * 70}")


def get_preset_by_index(index: int) -> Tuple[Optional[str], Optional[dict]]:
    """Get preset by zero-based menu index."""
    presets = get_preset_list()
    if 0 <= index < len(presets):
        return presets[index]
    return None, None


def get_preset_config(key: str) -> dict:
    """Get the generator keyword arguments of a preset; raises KeyError if unknown."""
    preset = PRESETS[key]
    return {k: preset[k] for k in GENERATOR_KEYS}
