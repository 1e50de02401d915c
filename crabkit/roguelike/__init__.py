"""A terminal roguelike: generated dungeon, player movement, game flow and drawing."""