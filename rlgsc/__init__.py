"""Reinforcement-learning environment framework for a car-soccer arena: game state, actions, observations, rewards, terminal conditions, state setters and a gym loop."""

__version__ = "1.0.1"