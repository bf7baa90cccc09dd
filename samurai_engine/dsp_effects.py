"""Identifiers and parameter layouts of the built-in DSP effects.

Every effect type has an enumeration of its parameter indices, to be used
as the ``index`` argument when setting or reading a DSP parameter. A few
parameters take values from their own enumerations, which are defined here
as well.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

LOUDNESS_METER_HISTOGRAM_SAMPLES = 66
LOUDNESS_METER_WEIGHTING_CHANNELS = 32


class DspType(IntEnum):
    """Kinds of built-in DSP units; ``MAX`` is the number of kinds."""

    UNKNOWN = 0
    MIXER = 1
    OSCILLATOR = 2
    LOWPASS = 3
    ITLOWPASS = 4
    HIGHPASS = 5
    ECHO = 6
    FADER = 7
    FLANGE = 8
    DISTORTION = 9
    NORMALIZE = 10
    LIMITER = 11
    PARAMEQ = 12
    PITCHSHIFT = 13
    CHORUS = 14
    ITECHO = 15
    COMPRESSOR = 16
    SFXREVERB = 17
    LOWPASS_SIMPLE = 18
    DELAY = 19
    TREMOLO = 20
    SEND = 21
    RETURN = 22
    HIGHPASS_SIMPLE = 23
    PAN = 24
    THREE_EQ = 25
    FFT = 26
    LOUDNESS_METER = 27
    CONVOLUTIONREVERB = 28
    CHANNELMIX = 29
    TRANSCEIVER = 30
    OBJECTPAN = 31
    MULTIBAND_EQ = 32
    MULTIBAND_DYNAMICS = 33
    MAX = 34


class DspOscillator(IntEnum):
    TYPE = 0
    RATE = 1


class DspLowpass(IntEnum):
    CUTOFF = 0
    RESONANCE = 1


class DspItLowpass(IntEnum):
    CUTOFF = 0
    RESONANCE = 1


class DspHighpass(IntEnum):
    CUTOFF = 0
    RESONANCE = 1


class DspEcho(IntEnum):
    DELAY = 0
    FEEDBACK = 1
    DRY_LEVEL = 2
    WET_LEVEL = 3
    DELAY_CHANGE_MODE = 4


class DspEchoDelayChangeMode(IntEnum):
    FADE = 0
    LERP = 1
    NONE = 2


class DspFader(IntEnum):
    GAIN = 0
    OVERALL_GAIN = 1


class DspFlange(IntEnum):
    MIX = 0
    DEPTH = 1
    RATE = 2


class DspDistortion(IntEnum):
    LEVEL = 0


class DspNormalize(IntEnum):
    FADE_TIME = 0
    THRESHOLD = 1
    MAX_AMP = 2


class DspLimiter(IntEnum):
    RELEASE_TIME = 0
    CEILING = 1
    MAXIMIZER_GAIN = 2
    MODE = 3


class DspParamEq(IntEnum):
    CENTER = 0
    BANDWIDTH = 1
    GAIN = 2


class DspMultibandEq(IntEnum):
    A_FILTER = 0
    A_FREQUENCY = 1
    A_Q = 2
    A_GAIN = 3
    B_FILTER = 4
    B_FREQUENCY = 5
    B_Q = 6
    B_GAIN = 7
    C_FILTER = 8
    C_FREQUENCY = 9
    C_Q = 10
    C_GAIN = 11
    D_FILTER = 12
    D_FREQUENCY = 13
    D_Q = 14
    D_GAIN = 15
    E_FILTER = 16
    E_FREQUENCY = 17
    E_Q = 18
    E_GAIN = 19


class DspMultibandEqFilterType(IntEnum):
    DISABLED = 0
    LOWPASS_12DB = 1
    LOWPASS_24DB = 2
    LOWPASS_48DB = 3
    HIGHPASS_12DB = 4
    HIGHPASS_24DB = 5
    HIGHPASS_48DB = 6
    LOWSHELF = 7
    HIGHSHELF = 8
    PEAKING = 9
    BANDPASS = 10
    NOTCH = 11
    ALLPASS = 12
    LOWPASS_6DB = 13
    HIGHPASS_6DB = 14


class DspMultibandDynamics(IntEnum):
    LOWER_FREQUENCY = 0
    UPPER_FREQUENCY = 1
    LINKED = 2
    USE_SIDECHAIN = 3
    A_MODE = 4
    A_GAIN = 5
    A_THRESHOLD = 6
    A_RATIO = 7
    A_ATTACK = 8
    A_RELEASE = 9
    A_GAIN_MAKEUP = 10
    A_RESPONSE_DATA = 11
    B_MODE = 12
    B_GAIN = 13
    B_THRESHOLD = 14
    B_RATIO = 15
    B_ATTACK = 16
    B_RELEASE = 17
    B_GAIN_MAKEUP = 18
    B_RESPONSE_DATA = 19
    C_MODE = 20
    C_GAIN = 21
    C_THRESHOLD = 22
    C_RATIO = 23
    C_ATTACK = 24
    C_RELEASE = 25
    C_GAIN_MAKEUP = 26
    C_RESPONSE_DATA = 27


class DspMultibandDynamicsModeType(IntEnum):
    DISABLED = 0
    COMPRESS_UP = 1
    COMPRESS_DOWN = 2
    EXPAND_UP = 3
    EXPAND_DOWN = 4


class DspPitchShift(IntEnum):
    PITCH = 0
    FFT_SIZE = 1
    OVERLAP = 2
    MAX_CHANNELS = 3


class DspChorus(IntEnum):
    MIX = 0
    RATE = 1
    DEPTH = 2


class DspItEcho(IntEnum):
    WET_DRY_MIX = 0
    FEEDBACK = 1
    LEFT_DELAY = 2
    RIGHT_DELAY = 3
    PAN_DELAY = 4


class DspCompressor(IntEnum):
    THRESHOLD = 0
    RATIO = 1
    ATTACK = 2
    RELEASE = 3
    GAIN_MAKEUP = 4
    USE_SIDECHAIN = 5
    LINKED = 6


class DspSfxReverb(IntEnum):
    DECAY_TIME = 0
    EARLY_DELAY = 1
    LATE_DELAY = 2
    HF_REFERENCE = 3
    HF_DECAY_RATIO = 4
    DIFFUSION = 5
    DENSITY = 6
    LOW_SHELF_FREQUENCY = 7
    LOW_SHELF_GAIN = 8
    HIGH_CUT = 9
    EARLY_LATE_MIX = 10
    WET_LEVEL = 11
    DRY_LEVEL = 12


class DspLowpassSimple(IntEnum):
    CUTOFF = 0


class DspDelay(IntEnum):
    CH0 = 0
    CH1 = 1
    CH2 = 2
    CH3 = 3
    CH4 = 4
    CH5 = 5
    CH6 = 6
    CH7 = 7
    CH8 = 8
    CH9 = 9
    CH10 = 10
    CH11 = 11
    CH12 = 12
    CH13 = 13
    CH14 = 14
    CH15 = 15
    MAX_DELAY = 16


class DspTremolo(IntEnum):
    FREQUENCY = 0
    DEPTH = 1
    SHAPE = 2
    SKEW = 3
    DUTY = 4
    SQUARE = 5
    PHASE = 6
    SPREAD = 7


class DspSend(IntEnum):
    RETURN_ID = 0
    LEVEL = 1


class DspReturn(IntEnum):
    ID = 0
    INPUT_SPEAKER_MODE = 1


class DspHighpassSimple(IntEnum):
    CUTOFF = 0


class DspPan2dStereoModeType(IntEnum):
    DISTRIBUTED = 0
    DISCRETE = 1


class DspPanModeType(IntEnum):
    MONO = 0
    STEREO = 1
    SURROUND = 2


class DspPan3dRolloffType(IntEnum):
    LINEAR_SQUARED = 0
    LINEAR = 1
    INVERSE = 2
    INVERSE_TAPERED = 3
    CUSTOM = 4


class DspPan3dExtentModeType(IntEnum):
    AUTO = 0
    USER = 1
    OFF = 2


class DspPan(IntEnum):
    MODE = 0
    STEREO_POSITION_2D = 1
    DIRECTION_2D = 2
    EXTENT_2D = 3
    ROTATION_2D = 4
    LFE_LEVEL_2D = 5
    STEREO_MODE_2D = 6
    STEREO_SEPARATION_2D = 7
    STEREO_AXIS_2D = 8
    ENABLED_SPEAKERS = 9
    POSITION_3D = 10
    ROLLOFF_3D = 11
    MIN_DISTANCE_3D = 12
    MAX_DISTANCE_3D = 13
    EXTENT_MODE_3D = 14
    SOUND_SIZE_3D = 15
    MIN_EXTENT_3D = 16
    PAN_BLEND_3D = 17
    LFE_UPMIX_ENABLED = 18
    OVERALL_GAIN = 19
    SURROUND_SPEAKER_MODE = 20
    HEIGHT_BLEND_2D = 21
    ATTENUATION_RANGE = 22
    OVERRIDE_RANGE = 23


class DspThreeEqCrossoverSlopeType(IntEnum):
    SLOPE_12DB = 0
    SLOPE_24DB = 1
    SLOPE_48DB = 2


class DspThreeEq(IntEnum):
    LOW_GAIN = 0
    MID_GAIN = 1
    HIGH_GAIN = 2
    LOW_CROSSOVER = 3
    HIGH_CROSSOVER = 4
    CROSSOVER_SLOPE = 5


class DspFftWindowType(IntEnum):
    RECT = 0
    TRIANGLE = 1
    HAMMING = 2
    HANNING = 3
    BLACKMAN = 4
    BLACKMANHARRIS = 5


class DspFftDownmixType(IntEnum):
    NONE = 0
    MONO = 1


class DspFft(IntEnum):
    WINDOW_SIZE = 0
    WINDOW = 1
    BAND_START_FREQ = 2
    BAND_STOP_FREQ = 3
    SPECTRUM_DATA = 4
    RMS = 5
    SPECTRAL_CENTROID = 6
    IMMEDIATE_MODE = 7
    DOWNMIX = 8
    CHANNEL = 9


class DspLoudnessMeter(IntEnum):
    STATE = 0
    WEIGHTING = 1
    INFO = 2


class DspLoudnessMeterStateType(IntEnum):
    RESET_INTEGRATED = -3
    RESET_MAXPEAK = -2
    RESET_ALL = -1
    PAUSED = 0
    ANALYZING = 1


def _float_list(values, expected: int, what: str) -> list[float]:
    result = [float(v) for v in values]
    if len(result) != expected:
        raise ValueError(f"{what} must hold {expected} values, got {len(result)}")
    return result


@dataclass
class LoudnessMeterInfo:
    """Measurements reported by the loudness meter."""

    momentary_loudness: float = 0.0
    short_term_loudness: float = 0.0
    integrated_loudness: float = 0.0
    loudness_10th_percentile: float = 0.0
    loudness_95th_percentile: float = 0.0
    loudness_histogram: list[float] = field(
        default_factory=lambda: [0.0] * LOUDNESS_METER_HISTOGRAM_SAMPLES
    )
    max_true_peak: float = 0.0
    max_momentary_loudness: float = 0.0

    def __post_init__(self) -> None:
        self.loudness_histogram = _float_list(
            self.loudness_histogram,
            LOUDNESS_METER_HISTOGRAM_SAMPLES,
            "loudness_histogram",
        )


@dataclass
class LoudnessMeterWeighting:
    """Per-channel weights applied by the loudness meter."""

    channel_weight: list[float] = field(
        default_factory=lambda: [0.0] * LOUDNESS_METER_WEIGHTING_CHANNELS
    )

    def __post_init__(self) -> None:
        self.channel_weight = _float_list(
            self.channel_weight, LOUDNESS_METER_WEIGHTING_CHANNELS, "channel_weight"
        )


class DspConvolutionReverb(IntEnum):
    IR = 0
    WET = 1
    DRY = 2
    LINKED = 3


class DspChannelMixOutput(IntEnum):
    DEFAULT = 0
    ALL_MONO = 1
    ALL_STEREO = 2
    ALL_QUAD = 3
    ALL_5POINT1 = 4
    ALL_7POINT1 = 5
    ALL_LFE = 6
    ALL_7POINT1POINT4 = 7


DspChannelMix = IntEnum(
    "DspChannelMix",
    ["OUTPUT_GROUPING"]
    + [f"GAIN_CH{n}" for n in range(32)]
    + [f"OUTPUT_CH{n}" for n in range(32)],
    start=0,
    module=__name__,
    qualname="DspChannelMix",
)


class DspTransceiverSpeakerMode(IntEnum):
    AUTO = -1
    MONO = 0
    STEREO = 1
    SURROUND = 2


class DspTransceiver(IntEnum):
    TRANSMIT = 0
    GAIN = 1
    CHANNEL = 2
    TRANSMIT_SPEAKER_MODE = 3


class DspObjectPan(IntEnum):
    POSITION_3D = 0
    ROLLOFF_3D = 1
    MIN_DISTANCE_3D = 2
    MAX_DISTANCE_3D = 3
    EXTENT_MODE_3D = 4
    SOUND_SIZE_3D = 5
    MIN_EXTENT_3D = 6
    OVERALL_GAIN = 7
    OUTPUT_GAIN = 8
    ATTENUATION_RANGE = 9
    OVERRIDE_RANGE = 10