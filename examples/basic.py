"""Basic usage of the Roland V-8HD controller.

Run with the switcher connected over USB MIDI::

    python examples/basic.py
"""

import logging

from roland_v8hd import ButtonState, TransitionType, connect

logging.basicConfig(level=logging.INFO)

v8hd = connect()
print("Connected to Roland V-8HD")

v8hd.set_transition_type(TransitionType.MIX)
v8hd.set_mix_wipe_time(1.5)

v8hd.set_auto_button(ButtonState.ON)

v8hd.close()
print("Connection closed")
