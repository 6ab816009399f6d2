"""Default page content: rooms per section and modal detail entries."""

from __future__ import annotations

from layernav.core.registry import ContentRegistry, ModalEntry, RoomEntry

DEFAULT_ROOMS: tuple[RoomEntry, ...] = (
    RoomEntry("neural-engine-room", "SYSTEM", "NEURAL ENGINE", ("neural-architecture", "learning-protocol")),
    RoomEntry("sensor-array-room", "SYSTEM", "SENSOR ARRAY", ("sensor-map",)),
    RoomEntry("power-core-room", "SYSTEM", "POWER CORE", ("power-diagram",)),
    RoomEntry("ai-core-room", "AI CORE", "INTERNAL LOGIC", ("input-pipeline", "decision-tree", "feedback-system")),
    RoomEntry("processor-room", "HARDWARE", "PROCESSOR", ("processor-arch",)),
    RoomEntry("assembly-room", "LAB", "ASSEMBLY", ("assembly-checklist", "test-protocols")),
    RoomEntry("calibration-room", "LAB", "CALIBRATION", ("calibration-data", "deployment-log")),
)

DEFAULT_MODALS: tuple[ModalEntry, ...] = (
    ModalEntry(
        "neural-architecture",
        "NEURAL ENGINE ⟡ ARCHITECTURE MAP",
        "A 12-layer deep model with residual connections; 2048 neurons per layer, "
        "47.3 million trainable weights.",
    ),
    ModalEntry(
        "learning-protocol",
        "NEURAL ENGINE ⟡ LEARNING LOGS",
        "Supervised baseline on 2.4 million labeled examples, refined by reinforcement "
        "learning. Validation accuracy 97.3%, 12ms average inference.",
    ),
    ModalEntry(
        "sensor-map",
        "SENSOR ARRAY ⟡ SPATIAL LAYOUT",
        "47 sensors give 360-degree coverage; fused into one world model at 120Hz.",
    ),
    ModalEntry(
        "power-diagram",
        "POWER CORE ⟡ DISTRIBUTION DIAGRAM",
        "Primary cell feeds regulated buses for compute, actuation and sensing with "
        "isolated fault domains.",
    ),
    ModalEntry(
        "input-pipeline",
        "AI CORE ⟡ INPUT PIPELINE",
        "Raw sensor streams are normalised, timestamped and batched before inference.",
    ),
    ModalEntry(
        "decision-tree",
        "AI CORE ⟡ DECISION TREE",
        "Perception results feed a prioritised decision hierarchy: safety, mission, "
        "efficiency.",
    ),
    ModalEntry(
        "feedback-system",
        "AI CORE ⟡ FEEDBACK SYSTEM",
        "Outcome signals are scored and folded back into policy updates.",
    ),
    ModalEntry(
        "processor-arch",
        "PROCESSOR ⟡ CORE LAYOUT",
        "Heterogeneous cores: general-purpose clusters alongside dedicated tensor units.",
    ),
    ModalEntry(
        "assembly-checklist",
        "LAB ⟡ ASSEMBLY CHECKLIST",
        "Chassis, wiring harness, sensor mounts and compute module verified in sequence.",
    ),
    ModalEntry(
        "test-protocols",
        "LAB ⟡ TEST PROTOCOLS",
        "Bench, integration and field trials with pass criteria recorded per stage.",
    ),
    ModalEntry(
        "calibration-data",
        "LAB ⟡ CALIBRATION DATA",
        "Per-sensor offsets and gains captured against reference targets.",
    ),
    ModalEntry(
        "deployment-log",
        "LAB ⟡ DEPLOYMENT LOG",
        "Field deployment timeline with firmware revisions and incident notes.",
    ),
)


def default_registry() -> ContentRegistry:
    """Return the registry for the default page content."""
    return ContentRegistry(DEFAULT_ROOMS, DEFAULT_MODALS)
