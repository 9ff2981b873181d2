"""The game's scenes: title, town, tavern and battle."""