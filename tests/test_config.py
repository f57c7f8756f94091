from pingis.config import TournamentConfig
from pingis.constants import DEFAULT_NUM_PLAYERS, MAX_PAIRING_ATTEMPTS


def test_defaults():
    config = TournamentConfig()
    assert config.num_players == DEFAULT_NUM_PLAYERS == 14
    assert config.max_pairing_attempts == MAX_PAIRING_ATTEMPTS == 1000
    assert config.seed is None


def test_from_dict_fills_missing_keys():
    config = TournamentConfig.from_dict({"name": "Klubbmästerskap", "seed": 3})
    assert config.name == "Klubbmästerskap"
    assert config.seed == 3
    assert config.num_players == DEFAULT_NUM_PLAYERS
    assert TournamentConfig.from_dict(config.to_dict()) == config
