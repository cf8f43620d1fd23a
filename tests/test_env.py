import numpy as np
import pytest

from connect4engine.errors import GameOver
from connect4engine.game.rules import ConnectFourEnv
from connect4engine.utils import ROWS, COLS, Side


def test_reset_returns_empty_board():
    env = ConnectFourEnv()
    observation, info = env.reset(seed=0)

    assert observation.shape == (ROWS, COLS)
    assert observation.dtype == np.int8
    assert not observation.any()
    assert env.observation_space.contains(observation)
    assert info['status'] == 'IN_PROGRESS'
    assert info['side_to_move'] == 'FIRST'
    assert info['valid_moves'] == list(range(COLS))


def test_opponent_opens_when_agent_plays_second():
    env = ConnectFourEnv(agent_side=Side.SECOND)
    observation, info = env.reset()

    assert np.count_nonzero(observation) == 1
    assert observation[ROWS - 1, 3] == Side.FIRST.value
    assert info['side_to_move'] == 'SECOND'


def test_step_plays_agent_and_reply():
    env = ConnectFourEnv()
    env.reset()
    observation, reward, terminated, truncated, info = env.step(0)

    assert observation[ROWS - 1, 0] == Side.FIRST.value
    assert np.count_nonzero(observation == Side.SECOND.value) == 1
    assert reward == env.reward_step
    assert not terminated and not truncated
    assert info['moves_made'] == 2


def test_invalid_action_is_penalised():
    env = ConnectFourEnv()
    env.reset()
    observation, reward, terminated, truncated, info = env.step(COLS)

    assert reward == env.reward_invalid_move
    assert not terminated
    assert truncated
    assert info['invalid_move']
    assert not observation.any()


def test_episode_runs_to_completion():
    env = ConnectFourEnv()
    _, info = env.reset()

    terminated = False
    reward = 0.0
    for _ in range(ROWS * COLS):
        _, reward, terminated, truncated, info = env.step(info['valid_moves'][0])
        assert not truncated
        if terminated:
            break

    assert terminated
    assert reward in (env.reward_win, env.reward_lose, env.reward_draw)
    assert info['status'] != 'IN_PROGRESS'

    with pytest.raises(GameOver):
        env.step(0)


def test_render_modes():
    env = ConnectFourEnv(render_mode="ascii")
    env.reset()
    assert "|0 1 2 3 4 5 6|" in env.render()

    assert ConnectFourEnv().render() is None
    with pytest.raises(ValueError):
        ConnectFourEnv(render_mode="rgb_array")
