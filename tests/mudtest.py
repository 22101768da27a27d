"""Shared helpers for building small test worlds."""

import mudstuck


def make_door_world(closed=True, locked=False, extra=()):
    """World with a rusty metal door inside a small room.

    Args:
        closed: (bool) Payload of the door's Closable attribute
        locked: (bool) Payload of the door's Lockable attribute
        extra: (Iterable[Entity]) Additional entities appended in order
    """
    door = mudstuck.Entity(
        id="door",
        name=("rusty", "metal", "door"),
        short_description="Metalltür",
        long_description='#(if (closed rusty.metal.door) "Sie ist zu." "Sie ist offen.")',
        attributes=[mudstuck.Closable(closed), mudstuck.Lockable(locked)],
    )
    room = mudstuck.Entity(
        id="room",
        name=("small", "room"),
        short_description="Ein kleiner Raum",
        long_description="Hier steht eine #(if (locked rusty.metal.door) 'verriegelte' 'einfache') Tür.",
        attributes=[mudstuck.Roomlike(mudstuck.Room(("door",)))],
    )
    return mudstuck.World([door, room, *extra], start_location="room", name="Test World")
