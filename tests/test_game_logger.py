"""
Testing how responses are summarized in the game log.
"""

from wordquest.utils.game_logger import game_logger


def test_game_state_summary():
    response = {
        'success': True,
        'state': {'status': 'won', 'current_round': 2, 'max_rounds': 6, 'game_over': True,
                  'won': True, 'guesses': ['train', 'graph'], 'answer': 'graph'}
    }
    summary = game_logger._sanitize_response_data(response)['state']

    assert summary['guesses_count'] == 2
    assert summary['answer_revealed'] is True
    assert 'answer' not in summary


def test_vault_state_summary():
    response = {
        'success': True,
        'state': {'vault_id': 'v1', 'level_index': 1, 'level_count': 4, 'attempts': 3,
                  'solved': False, 'title': 'Level 2', 'prompt': '...', 'hints': {'length': '...'}}
    }
    summary = game_logger._sanitize_response_data(response)['state']

    assert summary == {'level_index': 1, 'level_count': 4, 'attempts': 3, 'solved': False}


def test_non_dict_response():
    assert game_logger._sanitize_response_data(['x']) == {'data_type': 'list'}
