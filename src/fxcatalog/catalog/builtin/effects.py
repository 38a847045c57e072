RECORDS = [
    {
        "id": "brightness",
        "name": "Brightness",
        "category": "color-correction",
        "complexity": "basic",
        "tags": ["popular", "professional"],
        "labels": {"en": "Brightness", "ru": "Яркость", "es": "Brillo"},
        "description": {"en": "Raise or lower the overall exposure"},
        "ffmpegCommand": "eq=brightness={intensity}",
        "params": {"intensity": 0.1},
    },
    {
        "id": "contrast",
        "name": "Contrast",
        "category": "color-correction",
        "complexity": "basic",
        "tags": ["popular"],
        "labels": {"en": "Contrast", "ru": "Контраст", "es": "Contraste"},
        "description": {"en": "Stretch the difference between shadows and highlights"},
        "ffmpegCommand": "eq=contrast={intensity}",
        "params": {"intensity": 1.2},
    },
    {
        "id": "gaussian-blur",
        "name": "Gaussian Blur",
        "category": "blur",
        "complexity": "intermediate",
        "tags": ["smooth"],
        "labels": {"en": "Gaussian Blur", "ru": "Размытие по Гауссу"},
        "description": {"en": "Soft blur with a configurable radius"},
        "ffmpegCommand": "gblur=sigma={radius}",
        "params": {"radius": 5},
    },
    {
        "id": "vignette",
        "name": "Vignette",
        "category": "artistic",
        "complexity": "basic",
        "tags": ["vintage", "cinematic"],
        "labels": {"en": "Vignette", "ru": "Виньетка"},
        "description": {"en": "Darken the frame edges"},
        "ffmpegCommand": "vignette=angle={angle}",
        "params": {"angle": 0.6},
    },
    {
        "id": "film-grain",
        "name": "Film Grain",
        "category": "vintage",
        "complexity": "intermediate",
        "tags": ["vintage", "retro"],
        "labels": {"en": "Film Grain", "ru": "Зерно плёнки"},
        "description": {"en": "Temporal noise that imitates analogue film stock"},
        "ffmpegCommand": "noise=alls={strength}:allf=t+u",
        "params": {"strength": 20},
    },
    {
        "id": "glitch",
        "name": "Glitch",
        "category": "distortion",
        "complexity": "advanced",
        "tags": ["modern", "dramatic"],
        "labels": {"en": "Glitch", "ru": "Глитч"},
        "description": {"en": "Digital corruption with RGB channel shifts"},
        "ffmpegCommand": "rgbashift=rh={shift}:bh=-{shift},noise=alls={noise}",
        "params": {"shift": 4, "noise": 12},
    },
    {
        "id": "speed-ramp",
        "name": "Speed Ramp",
        "category": "motion",
        "complexity": "advanced",
        "tags": ["cinematic", "dynamic"],
        "labels": {"en": "Speed Ramp", "ru": "Изменение скорости"},
        "description": {"en": "Change playback speed"},
        "ffmpegCommand": "setpts={factor}*PTS",
        "params": {"factor": 0.5},
    },
]
