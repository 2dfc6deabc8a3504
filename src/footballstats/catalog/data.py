"""Built-in player dataset.

Order matters: it drives the hub grid, the footer links and the related
players shown on each profile.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple


DEFAULT_PLAYERS: Tuple[Dict[str, Any], ...] = (
    {
        "name": "Lionel Messi",
        "slug": "lionel-messi",
        "team": "Inter Miami CF",
        "position": "Forward",
        "nationality": "Argentina",
        "age": 38,
        "goals": 838,
        "assists": 377,
        "appearances": 1068,
        "image": "https://upload.wikimedia.org/wikipedia/commons/8/89/Lionel_Messi_2022.jpg",
        "description": (
            "Widely regarded as one of the greatest football players of all time, Lionel Messi has "
            "broken countless records throughout his illustrious career. An eight-time Ballon d'Or "
            "winner, Messi led Argentina to World Cup glory in 2022. He now plays for Inter Miami CF "
            "in MLS, continuing to showcase his extraordinary vision, dribbling, and finishing ability."
        ),
    },
    {
        "name": "Cristiano Ronaldo",
        "slug": "cristiano-ronaldo",
        "team": "Al Nassr",
        "position": "Forward",
        "nationality": "Portugal",
        "age": 41,
        "goals": 921,
        "assists": 264,
        "appearances": 1257,
        "image": "/images/players/cristiano-ronaldo.jpg",
        "description": (
            "Cristiano Ronaldo is a footballing phenomenon whose relentless drive and physical prowess "
            "have earned him five Ballon d'Or awards. With a record-breaking career spanning Manchester "
            "United, Real Madrid, Juventus, and now Al Nassr, Ronaldo holds the record for most "
            "international goals scored. His aerial ability, pace, and lethal finishing make him one "
            "of the most complete forwards ever."
        ),
    },
    {
        "name": "Kylian Mbappe",
        "slug": "kylian-mbappe",
        "team": "Real Madrid",
        "position": "Forward",
        "nationality": "France",
        "age": 27,
        "goals": 312,
        "assists": 138,
        "appearances": 484,
        "image": "/images/players/kylian-mbappe.jpg",
        "description": (
            "Kylian Mbappe is one of the most exciting young talents in world football. The French "
            "superstar became a World Cup winner at just 19 years old and has since established "
            "himself as one of the most prolific forwards in the game. Now at Real Madrid, Mbappe "
            "combines electrifying pace with clinical finishing and exceptional dribbling skills."
        ),
    },
    {
        "name": "Erling Haaland",
        "slug": "erling-haaland",
        "team": "Manchester City",
        "position": "Striker",
        "nationality": "Norway",
        "age": 25,
        "goals": 287,
        "assists": 58,
        "appearances": 331,
        "image": "/images/players/erling-haaland.jpg",
        "description": (
            "Erling Haaland is a goal-scoring machine who has redefined the modern striker role. "
            "Standing at 6'4\", the Norwegian powerhouse combines raw physicality with remarkable "
            "technique and lightning pace. Since joining Manchester City, Haaland has shattered "
            "Premier League scoring records and continues to terrorize defenses across Europe with "
            "his extraordinary finishing instincts."
        ),
    },
    {
        "name": "Jude Bellingham",
        "slug": "jude-bellingham",
        "team": "Real Madrid",
        "position": "Midfielder",
        "nationality": "England",
        "age": 22,
        "goals": 68,
        "assists": 54,
        "appearances": 289,
        "image": "/images/players/jude-bellingham.jpg",
        "description": (
            "Jude Bellingham burst onto the world stage as a teenager at Birmingham City before "
            "starring at Borussia Dortmund and earning a blockbuster move to Real Madrid. The English "
            "midfielder is known for his box-to-box dynamism, technical skill, and remarkable "
            "composure under pressure. He has quickly become one of the most complete midfielders in "
            "world football."
        ),
    },
    {
        "name": "Vinicius Junior",
        "slug": "vinicius-junior",
        "team": "Real Madrid",
        "position": "Winger",
        "nationality": "Brazil",
        "age": 25,
        "goals": 108,
        "assists": 97,
        "appearances": 316,
        "image": "/images/players/vinicius-junior.jpg",
        "description": (
            "Vinicius Junior is a Brazilian winger whose dazzling dribbling and explosive pace make "
            "him one of the most thrilling players to watch. A key player for Real Madrid, Vinicius "
            "scored the winning goal in the 2022 Champions League final and has established himself "
            "as one of the best wide players in world football. His ability to beat defenders "
            "one-on-one is virtually unmatched."
        ),
    },
)
