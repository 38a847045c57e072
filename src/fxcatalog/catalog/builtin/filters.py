RECORDS = [
    {
        "id": "s-log",
        "name": "S-Log",
        "category": "color-correction",
        "complexity": "intermediate",
        "tags": ["log", "professional"],
        "labels": {"en": "S-Log", "ru": "S-Log"},
        "description": {"en": "Flat log profile for grading"},
        "cssFilter": "contrast({contrast}) saturate({saturation})",
        "params": {"contrast": 0.8, "saturation": 0.9},
    },
    {
        "id": "warm",
        "name": "Warm",
        "category": "creative",
        "complexity": "basic",
        "tags": ["warm", "popular"],
        "labels": {"en": "Warm", "ru": "Тёплый"},
        "description": {"en": "Golden-hour warmth"},
        "cssFilter": "sepia({amount}) saturate(1.2)",
        "params": {"amount": 0.3},
    },
    {
        "id": "cool",
        "name": "Cool",
        "category": "creative",
        "complexity": "basic",
        "tags": ["cold"],
        "labels": {"en": "Cool", "ru": "Холодный"},
        "description": {"en": "Blue-tinted cool look"},
        "cssFilter": "hue-rotate({degrees}deg) saturate(1.1)",
        "params": {"degrees": 15},
    },
    {
        "id": "noir",
        "name": "Noir",
        "category": "artistic",
        "complexity": "basic",
        "tags": ["black-white", "cinematic"],
        "labels": {"en": "Noir", "ru": "Нуар"},
        "description": {"en": "High-contrast black and white"},
        "cssFilter": "grayscale(1) contrast({contrast})",
        "params": {"contrast": 1.4},
    },
    {
        "id": "teal-orange",
        "name": "Teal & Orange",
        "category": "cinematic",
        "complexity": "advanced",
        "tags": ["cinematic", "professional"],
        "labels": {"en": "Teal & Orange", "ru": "Бирюзовый и оранжевый"},
        "description": {"en": "Blockbuster complementary grade"},
        "cssFilter": "contrast({contrast}) saturate({saturation}) hue-rotate(-10deg)",
        "params": {"contrast": 1.1, "saturation": 1.3},
    },
]
