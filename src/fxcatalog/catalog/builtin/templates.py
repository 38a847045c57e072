RECORDS = [
    {
        "id": "split-vertical-landscape",
        "name": "Vertical Split",
        "category": "landscape",
        "complexity": "basic",
        "tags": ["split"],
        "labels": {"en": "Vertical Split", "ru": "Вертикальное разделение"},
        "screens": 2,
        "split": "vertical",
    },
    {
        "id": "split-grid-2x2-landscape",
        "name": "Grid 2x2",
        "category": "landscape",
        "complexity": "basic",
        "tags": ["grid"],
        "labels": {"en": "Grid 2x2", "ru": "Сетка 2x2"},
        "screens": 4,
        "split": "grid",
    },
    {
        "id": "split-grid-3x4-landscape",
        "name": "Grid 3x4",
        "category": "landscape",
        "complexity": "advanced",
        "tags": ["grid"],
        "labels": {"en": "Grid 3x4", "ru": "Сетка 3x4"},
        "screens": 12,
        "split": "grid",
    },
    {
        "id": "split-horizontal-portrait",
        "name": "Horizontal Split",
        "category": "portrait",
        "complexity": "basic",
        "tags": ["split"],
        "labels": {"en": "Horizontal Split", "ru": "Горизонтальное разделение"},
        "screens": 2,
        "split": "horizontal",
    },
    {
        "id": "split-diagonal-square",
        "name": "Diagonal",
        "category": "square",
        "complexity": "intermediate",
        "tags": ["split", "creative"],
        "labels": {"en": "Diagonal", "ru": "Диагональ"},
        "screens": 2,
        "split": "diagonal",
    },
]
