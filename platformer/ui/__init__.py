"""Retained-mode UI elements, tween animations and an input-routing root."""