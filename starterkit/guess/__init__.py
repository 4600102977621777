"""Number guessing game with difficulties, time limits, statistics and scores."""