"""Small hand-built world for playing and testing."""

__all__ = ["make_example_world"]

import uuid

import mudstuck


def make_example_world():
    """Create the example world.

    Two rock rooms joined by a closed, unlocked metal door. The player
    starts in the small rock room. Ids are fresh UUIDs on every call.

    Returns:
        (World) New example world
    """
    room_id = uuid.uuid4()
    tunnel_id = uuid.uuid4()
    door_id = uuid.uuid4()

    door = mudstuck.Entity(
        id=door_id,
        name=("rusty", "metal", "door"),
        alias="metal_door_1",
        short_description="Metalltür",
        long_description=(
            "Eine verbeulte, rostige Tür aus Metall."
            '#(if (closed rusty.metal.door) " Die Tür ist geschlossen." "")'
        ),
        attributes=[
            mudstuck.Doorlike(mudstuck.Connection((room_id, tunnel_id))),
            mudstuck.Closable(True),
            mudstuck.Lockable(False),
        ],
    )
    room = mudstuck.Entity(
        id=room_id,
        name=("small", "rock", "room"),
        short_description="Ein kleiner Raum mit Wänden aus rohem Fels",
        long_description=(
            "Der Raum hat eine Größe von etwa sechs Quadratmetern. Der Boden, "
            "die Decke und die Wände bestehen aus roh behauenem Fels. Der Boden "
            "ist mit Schutt bedeckt.  In einer der Wände befindet sich eine "
            "zugemauerte Türöffnung, gegenüber ist eine "
            '#(if (closed rusty.metal.door) "geschlossene" "geöffnete")'
            '#(if (locked rusty.metal.door) " verriegelte" "") '
            "Metalltür eingelassen."
        ),
        attributes=[mudstuck.Roomlike(mudstuck.Room((door_id,)))],
    )
    tunnel = mudstuck.Entity(
        id=tunnel_id,
        name=("cramped", "rock", "tunnel"),
        short_description="Ein niedriger Felstunnel",
        long_description=(
            "Ein schmaler, niedriger Tunnel, etwa 1,70 Meter hoch und einen "
            "Meter breit. Der Tunnel führt leicht bergab und hat an beiden "
            "Enden Metalltüren"
        ),
        attributes=[mudstuck.Roomlike(mudstuck.Room((door_id,)))],
    )

    return mudstuck.World(
        [door, room, tunnel], start_location=room_id, name="Example World"
    )
