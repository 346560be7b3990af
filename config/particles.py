"""Configuration for the 2D interactive particle field."""

WINDOW = {
    "width": 2560,
    "height": 1440,
    "title": "Particle Field",
    "resizable": True,
}

PARTICLES = {
    "spatial_interval": 5.0,       # Grid spacing at spawn (147,456 particles at 2560x1440)
    "friction": 0.99,              # Per-frame velocity decay
}

FORCES = {
    "grav_force": 1400.0,          # Shared scale across all cursor modes
    "orbit_angle": 2.98,           # Rotation of the pull vector (radians)

    # Left mouse (held)
    "attract_softening": 4.5,
    "attract_cap": 0.8,

    # Right mouse (press edge only)
    "repel_softening": 8.0,
    "repel_cap": 1.8,
    "repel_scale": 8.0,

    # Middle mouse (held)
    "orbit_divisor": 8.0,
    "orbit_cap": 0.8,
}

RENDER = {
    "shape": "triangle",           # "triangle" or "point"
    "triangle_size": 1.0,          # Edge length of the unit triangle
    "point_size": 1.5,
    "brightness_mult": 3.0,        # HDR-style boost, clamped at 1.0 per channel
    "additive_blend": True,
}

MENU = {
    "title": "Particle Field",
    "title_font_size": 67,
    "button_font_size": 33,
    "button_width": 300,
    "button_height": 65,
    "button_margin": 10,
    "panel_padding": 90,
}

COLORS = {
    "background": (0.0, 0.0, 0.0, 1.0),
    "menu_background": (0.1, 0.1, 0.1, 1.0),
    "particle": (0.3, 0.8, 1.0),
    "panel": (0.863, 0.078, 0.235),        # Crimson
    "panel_shadow": (0.0, 0.0, 0.0, 0.9),
    "button_normal": (0.15, 0.15, 0.15),
    "button_hovered": (0.25, 0.25, 0.25),
    "button_hovered_pressed": (0.25, 0.65, 0.25),
    "button_pressed": (0.35, 0.75, 0.35),
    "text": (0.9, 0.9, 0.9),
}
