" sample replies from yabai, as decoded JSON "

DISPLAYS = [
    {
        "id": 1,
        "uuid": "37D8832A-2D66-02CA-B9F7-8F30A301B230",
        "index": 1,
        "label": "",
        "frame": {"x": 0.0, "y": 0.0, "w": 1512.0, "h": 982.0},
        "spaces": [1, 2, 3],
        "has-focus": True,
    },
    {
        "id": 3,
        "uuid": "9A9E2B19-CC7F-4F2B-9D4A-6D6C1E4C2F1E",
        "index": 2,
        "label": "",
        "frame": {"x": 1512, "y": -458, "w": 2560, "h": 1440},
        "spaces": [4],
        "has-focus": False,
    },
]

SPACES = [
    {
        "id": 3,
        "uuid": "",
        "index": 1,
        "label": "code",
        "type": "bsp",
        "display": 1,
        "windows": [1402, 877],
        "first-window": 1402,
        "last-window": 877,
        "has-focus": True,
        "is-visible": True,
        "is-native-fullscreen": False,
    },
    {
        "id": 5,
        "uuid": "6B1A3C41-0E3D-4C02-9A34-7A2D1E5BC1A0",
        "index": 2,
        "label": "",
        "type": "float",
        "display": 1,
        "windows": [],
        "first-window": 0,
        "last-window": 0,
        "has-focus": False,
        "is-visible": False,
        "is-native-fullscreen": False,
    },
]

WINDOWS = [
    {
        "id": 1402,
        "pid": 613,
        "app": "kitty",
        "title": "~/src",
        "frame": {"x": 10.0, "y": 38.0, "w": 742.0, "h": 934.0},
        "role": "AXWindow",
        "subrole": "AXStandardWindow",
        "root-window": True,
        "display": 1,
        "space": 1,
        "level": 0,
        "sub-level": 0,
        "layer": "normal",
        "opacity": 1,
        "split-type": "vertical",
        "split-child": "first_child",
        "stack-index": 0,
        "can-move": True,
        "can-resize": True,
        "has-focus": True,
        "has-shadow": True,
        "has-border": False,
        "has-parent-zoom": False,
        "has-fullscreen-zoom": False,
        "is-native-fullscreen": False,
        "is-visible": True,
        "is-minimized": False,
        "is-hidden": False,
        "is-floating": False,
        "is-sticky": False,
        "is-topmost": False,
        "is-grabbed": False,
    },
]
