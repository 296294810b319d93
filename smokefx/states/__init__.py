"""Screens of the simulator: menu, constant-speed demo and the smoke simulation."""