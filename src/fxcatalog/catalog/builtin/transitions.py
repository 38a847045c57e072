RECORDS = [
    {
        "id": "fade",
        "name": "Fade",
        "category": "basic",
        "complexity": "basic",
        "tags": ["smooth", "popular"],
        "labels": {"en": "Fade", "ru": "Затухание"},
        "description": {"en": "Cross-fade between two clips"},
        "ffmpegCommand": "xfade=transition=fade:duration={duration}:offset={offset}",
        "params": {"duration": 1.0, "offset": 0},
    },
    {
        "id": "slide-left",
        "name": "Slide Left",
        "category": "slide",
        "complexity": "basic",
        "tags": ["dynamic"],
        "labels": {"en": "Slide Left", "ru": "Сдвиг влево"},
        "description": {"en": "Next clip pushes in from the right"},
        "ffmpegCommand": "xfade=transition=slideleft:duration={duration}:offset={offset}",
        "params": {"duration": 0.8, "offset": 0},
    },
    {
        "id": "zoom-in",
        "name": "Zoom In",
        "category": "zoom",
        "complexity": "intermediate",
        "tags": ["dynamic", "modern"],
        "labels": {"en": "Zoom In", "ru": "Приближение"},
        "description": {"en": "Zoom through the outgoing clip"},
        "ffmpegCommand": "xfade=transition=zoomin:duration={duration}:offset={offset}",
        "params": {"duration": 1.2, "offset": 0},
    },
    {
        "id": "circle-open",
        "name": "Circle Open",
        "category": "shape",
        "complexity": "intermediate",
        "tags": ["creative"],
        "labels": {"en": "Circle Open", "ru": "Круговое открытие"},
        "description": {"en": "Iris wipe revealing the next clip"},
        "ffmpegCommand": "xfade=transition=circleopen:duration={duration}:offset={offset}",
        "params": {"duration": 1.0, "offset": 0},
    },
    {
        "id": "pixelize",
        "name": "Pixelize",
        "category": "digital",
        "complexity": "advanced",
        "tags": ["modern", "glitch"],
        "labels": {"en": "Pixelize", "ru": "Пикселизация"},
        "description": {"en": "Dissolve through coarse pixel blocks"},
        "ffmpegCommand": "xfade=transition=pixelize:duration={duration}:offset={offset}",
        "params": {"duration": 0.6, "offset": 0},
    },
]
