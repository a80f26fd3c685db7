"""Component types, tag flags and entity state used by the entity system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag, auto
from typing import TYPE_CHECKING, Callable, Optional

from ..animation import Animation
from ..common import VECTOR2_ZERO, Color, Direction, Rectangle, Reflection, Vector2

if TYPE_CHECKING:
    from .world import World


class Tag(IntFlag):
    """Which components an entity carries."""

    NONE = 0
    IDENTIFIER = 1 << 0
    POSITION = 1 << 1
    DIMENSION = 1 << 2
    COLOR = 1 << 3
    SPRITE = 1 << 4
    ANIMATION = 1 << 5
    KINETIC = 1 << 6
    SMOOTH = 1 << 7
    COLLIDER = 1 << 8
    MORTAL = 1 << 9
    DAMAGE = 1 << 10
    FLEETING = 1 << 11
    PLAYER = 1 << 12


class Resolve(IntFlag):
    """Directions other entities resolve against when they hit a collider."""

    NONE = 0
    UP = 1 << 0
    RIGHT = 1 << 1
    DOWN = 1 << 2
    LEFT = 1 << 3
    ALL = UP | RIGHT | DOWN | LEFT


class Layer(IntFlag):
    """Collision layers."""

    NONE = 0
    TERRAIN = 1 << 0
    LETHAL = 1 << 1
    INTERACTABLE = 1 << 2
    INVISIBLE = 1 << 3


class EntityType(IntEnum):
    NONE = 0
    BATTERY = 1
    BLOCK = 2
    CLOUD_PARTICLE = 3
    FOG = 4
    FOG_PARTICLE = 5
    LAKITU = 6
    PLAYER = 7
    PLAYER_SHADOW = 8
    SOLAR_PANEL = 9
    SPIKE = 10
    WALKER = 11


class Sprite(Enum):
    """Sprites the game refers to by name."""

    BATTERY = auto()
    PLAYER_JUMP_0000 = auto()
    PLAYER_JUMP_0001 = auto()
    PLAYER_JUMP_0002 = auto()
    PLAYER_JUMP_0003 = auto()
    PLAYER_JUMP_0004 = auto()
    PLAYER_RUN_0000 = auto()
    PLAYER_RUN_0001 = auto()
    PLAYER_RUN_0002 = auto()
    PLAYER_RUN_0003 = auto()
    PLAYER_SPIN_0000 = auto()
    PLAYER_SPIN_0001 = auto()
    PLAYER_SPIN_0002 = auto()
    PLAYER_SPIN_0003 = auto()
    PLAYER_SPIN_0004 = auto()
    PLAYER_SPIN_0005 = auto()
    PLAYER_SPIN_0006 = auto()
    PLAYER_SPIN_0007 = auto()
    PLAYER_SPIN_0008 = auto()
    PLAYER_SPIN_0009 = auto()
    PLAYER_SPIN_0010 = auto()
    PLAYER_SPIN_0011 = auto()
    PLAYER_SPIN_0012 = auto()
    SOLAR_0000 = auto()
    SOLAR_0001 = auto()
    SPIKE_0000 = auto()
    SPIKE_0001 = auto()
    SPIKE_0002 = auto()
    SPIKE_0003 = auto()
    WALKER_IDLE_0000 = auto()
    WALKER_IDLE_0001 = auto()
    WALKER_IDLE_0002 = auto()
    WALKER_IDLE_0003 = auto()


class PlayerSprintState(Enum):
    NONE = 0
    ACCELERATING = 1
    TERMINAL = 2
    DECELERATING = 3


class PlayerStompState(Enum):
    NONE = 0
    STOMPING = 1
    STUCK_IN_GROUND = 2
    SPRINGING = 3


class PlayerAnimationState(Enum):
    STILL = 0
    RUNNING = 1
    JUMPING = 2
    STOMPING = 3
    SPINNING = 4
    DYING = 5
    RECOVERING = 6


@dataclass(frozen=True)
class OnCollisionParams:
    """Arguments handed to a collider's collision callback."""

    world: World
    entity: int
    aabb: Rectangle
    other_entity: int
    other_aabb: Rectangle
    overlap: Rectangle


@dataclass(frozen=True)
class OnResolutionParams:
    """Arguments handed to a collider's resolution callback."""

    world: World
    entity: int
    aabb: Rectangle
    other_entity: int
    other_aabb: Rectangle
    overlap: Rectangle
    resolution: Vector2


OnCollision = Callable[[OnCollisionParams], None]
# A resolution callback returns the entity's resolved bounding box.
OnResolution = Callable[[OnResolutionParams], Rectangle]


@dataclass
class CIdentifier:
    type: EntityType


@dataclass
class CPosition:
    value: Vector2 = VECTOR2_ZERO


@dataclass
class CDimension:
    width: float
    height: float


@dataclass
class CColor:
    value: Color


@dataclass
class CSprite:
    type: Sprite
    intramural: Rectangle = Rectangle()
    reflection: Reflection = Reflection.NONE


@dataclass
class CAnimation:
    type: Animation
    length: int
    frame_duration: float
    frame_timer: float = 0.0
    intramural: Rectangle = Rectangle()
    reflection: Reflection = Reflection.NONE
    frame: int = 0


@dataclass
class CKinetic:
    velocity: Vector2 = VECTOR2_ZERO
    acceleration: Vector2 = VECTOR2_ZERO


@dataclass
class CSmooth:
    previous: Vector2 = VECTOR2_ZERO


@dataclass
class CCollider:
    """Collision settings of an entity.

    ``layer`` is the layer the entity lives on, ``mask`` the layers it collides
    with. ``on_resolution`` is used by the first, resolving, pass of collision;
    ``on_collision`` by the second pass, against the resolved box.
    """

    resolution_schema: Resolve = Resolve.NONE
    layer: Layer = Layer.NONE
    mask: Layer = Layer.NONE
    on_resolution: Optional[OnResolution] = None
    on_collision: Optional[OnCollision] = None


@dataclass
class CMortal:
    hp: int


@dataclass
class CDamage:
    value: int


@dataclass
class CFleeting:
    lifetime: float
    age: float = 0.0


@dataclass
class CPlayer:
    handle: int


@dataclass
class Player:
    """Movement and animation state of a player."""

    gravity_force: Vector2 = VECTOR2_ZERO
    grounded_last_frame: bool = False
    grounded: bool = False
    jumping: bool = False
    coyote_timer: float = 0.0
    coyote_time_active: bool = False
    dead: bool = False
    invulnerable_timer: float = 0.0
    sprint_timer: float = 0.0
    sprint_duration: float = 0.0
    initial_direction: Direction = Direction.NONE
    sprint_direction: Direction = Direction.NONE
    sprint_state: PlayerSprintState = PlayerSprintState.NONE
    sprint_force: Vector2 = VECTOR2_ZERO
    animation_state: PlayerAnimationState = PlayerAnimationState.STILL
    stomp_timer: float = 0.0
    stomp_state: PlayerStompState = PlayerStompState.NONE
    stomp_force: Vector2 = VECTOR2_ZERO
    trail_timer: float = 0.0
    velocity_last_frame: float = 0.0
    extra: dict = field(default_factory=dict)