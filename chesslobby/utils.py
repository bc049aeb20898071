import random

GUEST_PREFIX = "guest-"

ADJECTIVES = [
    "agile", "bold", "brave", "calm", "clever", "daring", "eager", "fierce",
    "gentle", "grim", "happy", "humble", "jolly", "keen", "lively", "lucky",
    "mighty", "nimble", "noble", "patient", "proud", "quick", "quiet", "rapid",
    "sassy", "shy", "silent", "sly", "steady", "swift", "tidy", "wise",
]

NOUNS = [
    "bishop", "knight", "rook", "pawn", "queen", "king", "castle", "gambit",
    "badger", "falcon", "otter", "heron", "lynx", "raven", "wolf", "fox",
    "owl", "tiger", "panda", "beast", "comet", "ember", "river", "storm",
]

# Fresh OS entropy per call; no generator state is shared between requests.
_rng = random.SystemRandom()


def random_guest_name() -> str:
    token = f"{_rng.choice(ADJECTIVES)}-{_rng.choice(NOUNS)}-{_rng.randint(0, 9999):04d}"
    return f"{GUEST_PREFIX}{token}"
