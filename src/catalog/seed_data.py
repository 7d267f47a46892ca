"""Sample storefront catalog used to seed an empty database."""

from typing import Any, Dict, List

SAMPLE_GAMES: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Cyberpunk 2077",
        "description": "An open-world, action-adventure RPG set in Night City, a megalopolis "
        "obsessed with power, glamour and body modification.",
        "price": 59.99,
        "discount": 25,
        "developer": "CD Projekt Red",
        "publisher_id": "cd-projekt",
        "release_date": "2020-12-10",
        "rating": 4.2,
        "genres": ["rpg", "action", "open-world"],
        "platforms": ["steam", "epic", "gog"],
        "tags": ["Cyberpunk", "RPG", "Open World", "Futuristic"],
    },
    {
        "id": "2",
        "title": "Elden Ring",
        "description": "An action RPG developed by FromSoftware and published by Bandai Namco.",
        "price": 59.99,
        "discount": 0,
        "developer": "FromSoftware",
        "publisher_id": "bandai-namco",
        "release_date": "2022-02-25",
        "rating": 4.8,
        "genres": ["rpg", "action", "open-world"],
        "platforms": ["steam", "xbox", "playstation"],
        "tags": ["Fantasy", "Souls-like", "Open World"],
    },
    {
        "id": "3",
        "title": "God of War",
        "description": "An action-adventure game developed by Santa Monica Studio.",
        "price": 49.99,
        "discount": 15,
        "developer": "Santa Monica Studio",
        "publisher_id": "sony",
        "release_date": "2022-01-14",
        "rating": 4.5,
        "genres": ["action", "adventure"],
        "platforms": ["steam", "epic", "playstation"],
        "tags": ["Action", "Adventure", "Mythology"],
    },
    {
        "id": "4",
        "title": "Red Dead Redemption 2",
        "description": "An epic tale of life in America's unforgiving heartland.",
        "price": 59.99,
        "discount": 33,
        "developer": "Rockstar Studios",
        "publisher_id": "take-two",
        "release_date": "2019-12-05",
        "rating": 4.7,
        "genres": ["action", "adventure", "open-world"],
        "platforms": ["steam", "epic"],
        "tags": ["Western", "Open World"],
    },
    {
        "id": "5",
        "title": "The Witcher 3: Wild Hunt",
        "description": "A story-driven open world RPG set in a visually stunning fantasy universe.",
        "price": 39.99,
        "discount": 70,
        "developer": "CD Projekt Red",
        "publisher_id": "cd-projekt",
        "release_date": "2015-05-19",
        "rating": 4.9,
        "genres": ["rpg", "open-world"],
        "platforms": ["steam", "epic", "gog"],
        "tags": ["Fantasy", "RPG"],
    },
    {
        "id": "6",
        "title": "Horizon Zero Dawn",
        "description": "Experience Aloy's legendary quest to unravel the mysteries of a "
        "world ruled by deadly machines.",
        "price": 49.99,
        "discount": 50,
        "developer": "Guerrilla Games",
        "publisher_id": "sony",
        "release_date": "2020-08-07",
        "rating": 4.6,
        "genres": ["action", "rpg", "open-world"],
        "platforms": ["steam", "epic"],
        "tags": ["Action", "Open World", "Robots"],
    },
    {
        "id": "7",
        "title": "Hades",
        "description": "A god-like rogue-like dungeon crawler.",
        "price": 24.99,
        "discount": 20,
        "developer": "Supergiant Games",
        "publisher_id": "supergiant",
        "release_date": "2020-09-17",
        "rating": 4.8,
        "genres": ["action", "roguelike", "indie"],
        "platforms": ["steam", "epic", "nintendo"],
        "tags": ["Indie", "Roguelike"],
    },
    {
        "id": "8",
        "title": "Stardew Valley",
        "description": "You've inherited your grandfather's old farm plot in Stardew Valley.",
        "price": 14.99,
        "discount": 0,
        "developer": "ConcernedApe",
        "publisher_id": "concernedape",
        "release_date": "2016-02-26",
        "rating": 4.7,
        "genres": ["simulation", "rpg", "indie"],
        "platforms": ["steam", "gog"],
        "tags": ["Indie", "Simulation", "Farming"],
    },
    {
        "id": "9",
        "title": "Assassin's Creed Valhalla",
        "description": "Become Eivor, a legendary Viking raider on a quest for glory.",
        "price": 59.99,
        "discount": 60,
        "developer": "Ubisoft Montreal",
        "publisher_id": "ubisoft",
        "release_date": "2020-11-10",
        "rating": 4.3,
        "genres": ["action", "rpg", "open-world"],
        "platforms": ["epic", "ubisoft"],
        "tags": ["Action", "Open World", "Vikings"],
    },
    {
        "id": "10",
        "title": "Far Cry 6",
        "description": "Enter the adrenaline-filled world of a modern-day guerrilla revolution.",
        "price": 59.99,
        "discount": 50,
        "developer": "Ubisoft Toronto",
        "publisher_id": "ubisoft",
        "release_date": "2021-10-07",
        "rating": 4.0,
        "genres": ["action", "shooter", "open-world"],
        "platforms": ["epic", "ubisoft"],
        "tags": ["Action", "Open World", "FPS"],
    },
    {
        "id": "11",
        "title": "The Last of Us Part I",
        "description": "Experience the emotional storytelling and unforgettable characters.",
        "price": 59.99,
        "discount": 0,
        "developer": "Naughty Dog",
        "publisher_id": "sony",
        "release_date": "2022-09-02",
        "rating": 4.9,
        "genres": ["action", "adventure", "survival"],
        "platforms": ["steam", "playstation"],
        "tags": ["Action", "Survival"],
    },
    {
        "id": "12",
        "title": "Hogwarts Legacy",
        "description": "An immersive, open-world action RPG set in the world first "
        "introduced in the Harry Potter books.",
        "price": 59.99,
        "discount": 20,
        "developer": "Avalanche Software",
        "publisher_id": "warner",
        "release_date": "2023-02-10",
        "rating": 4.5,
        "genres": ["rpg", "open-world"],
        "platforms": ["steam", "epic"],
        "tags": ["Fantasy", "Open World", "Magic"],
    },
    {
        "id": "13",
        "title": "Open World Explorer Bundle",
        "description": "Four sprawling open worlds in one bundle.",
        "price": 129.99,
        "discount": 28,
        "developer": "Various",
        "publisher_id": "ubisoft",
        "release_date": "2023-06-01",
        "rating": None,
        "genres": ["open-world", "adventure"],
        "platforms": ["epic", "ubisoft"],
        "tags": ["Bundle", "Open World"],
    },
]
