"""Result codes of the audio system and their English explanations."""

from __future__ import annotations

from enum import IntEnum

_UNKNOWN = "Unknown error."


class Result(IntEnum):
    """Outcome of an audio system call; ``OK`` means success."""

    OK = 0
    BADCOMMAND = 1
    CHANNEL_ALLOC = 2
    CHANNEL_STOLEN = 3
    DMA = 4
    DSP_CONNECTION = 5
    DSP_DONTPROCESS = 6
    DSP_FORMAT = 7
    DSP_INUSE = 8
    DSP_NOTFOUND = 9
    DSP_RESERVED = 10
    DSP_SILENCE = 11
    DSP_TYPE = 12
    FILE_BAD = 13
    FILE_COULDNOTSEEK = 14
    FILE_DISKEJECTED = 15
    FILE_EOF = 16
    FILE_ENDOFDATA = 17
    FILE_NOTFOUND = 18
    FORMAT = 19
    HEADER_MISMATCH = 20
    HTTP = 21
    HTTP_ACCESS = 22
    HTTP_PROXY_AUTH = 23
    HTTP_SERVER_ERROR = 24
    HTTP_TIMEOUT = 25
    INITIALIZATION = 26
    INITIALIZED = 27
    INTERNAL = 28
    INVALID_FLOAT = 29
    INVALID_HANDLE = 30
    INVALID_PARAM = 31
    INVALID_POSITION = 32
    INVALID_SPEAKER = 33
    INVALID_SYNCPOINT = 34
    INVALID_THREAD = 35
    INVALID_VECTOR = 36
    MAXAUDIBLE = 37
    MEMORY = 38
    MEMORY_CANTPOINT = 39
    NEEDS3D = 40
    NEEDSHARDWARE = 41
    NET_CONNECT = 42
    NET_SOCKET_ERROR = 43
    NET_URL = 44
    NET_WOULD_BLOCK = 45
    NOTREADY = 46
    OUTPUT_ALLOCATED = 47
    OUTPUT_CREATEBUFFER = 48
    OUTPUT_DRIVERCALL = 49
    OUTPUT_FORMAT = 50
    OUTPUT_INIT = 51
    OUTPUT_NODRIVERS = 52
    PLUGIN = 53
    PLUGIN_MISSING = 54
    PLUGIN_RESOURCE = 55
    PLUGIN_VERSION = 56
    RECORD = 57
    REVERB_CHANNELGROUP = 58
    REVERB_INSTANCE = 59
    SUBSOUNDS = 60
    SUBSOUND_ALLOCATED = 61
    SUBSOUND_CANTMOVE = 62
    TAGNOTFOUND = 63
    TOOMANYCHANNELS = 64
    TRUNCATED = 65
    UNIMPLEMENTED = 66
    UNINITIALIZED = 67
    UNSUPPORTED = 68
    VERSION = 69
    EVENT_ALREADY_LOADED = 70
    EVENT_LIVEUPDATE_BUSY = 71
    EVENT_LIVEUPDATE_MISMATCH = 72
    EVENT_LIVEUPDATE_TIMEOUT = 73
    EVENT_NOTFOUND = 74
    STUDIO_UNINITIALIZED = 75
    STUDIO_NOT_LOADED = 76
    INVALID_STRING = 77
    ALREADY_LOCKED = 78
    NOT_LOCKED = 79
    RECORD_DISCONNECTED = 80
    TOOMANYSAMPLES = 81

    def message(self) -> str:
        """Return the English explanation of this result."""
        return _MESSAGES.get(self, _UNKNOWN)


_MESSAGES: dict[Result, str] = {
    Result.OK: "No errors.",
    Result.BADCOMMAND: "Tried to call a function on a data type that does not allow this type of functionality (ie calling Sound::lock on a streaming sound).",
    Result.CHANNEL_ALLOC: "Error trying to allocate a channel.",
    Result.CHANNEL_STOLEN: "The specified channel has been reused to play another sound.",
    Result.DMA: "DMA Failure.  See debug output for more information.",
    Result.DSP_CONNECTION: "DSP connection error.  Connection possibly caused a cyclic dependency or connected dsps with incompatible buffer counts.",
    Result.DSP_DONTPROCESS: "DSP return code from a DSP process query callback.  Tells mixer not to call the process callback and therefore not consume CPU.  Use this to optimize the DSP graph.",
    Result.DSP_FORMAT: "DSP Format error.  A DSP unit may have attempted to connect to this network with the wrong format, or a matrix may have been set with the wrong size if the target unit has a specified channel map.",
    Result.DSP_INUSE: "DSP is already in the mixer's DSP network. It must be removed before being reinserted or released.",
    Result.DSP_NOTFOUND: "DSP connection error.  Couldn't find the DSP unit specified.",
    Result.DSP_RESERVED: "DSP operation error.  Cannot perform operation on this DSP as it is reserved by the system.",
    Result.DSP_SILENCE: "DSP return code from a DSP process query callback.  Tells mixer silence would be produced from read, so go idle and not consume CPU.  Use this to optimize the DSP graph.",
    Result.DSP_TYPE: "DSP operation cannot be performed on a DSP of this type.",
    Result.FILE_BAD: "Error loading file.",
    Result.FILE_COULDNOTSEEK: "Couldn't perform seek operation.  This is a limitation of the medium (ie netstreams) or the file format.",
    Result.FILE_DISKEJECTED: "Media was ejected while reading.",
    Result.FILE_EOF: "End of file unexpectedly reached while trying to read essential data (truncated?).",
    Result.FILE_ENDOFDATA: "End of current chunk reached while trying to read data.",
    Result.FILE_NOTFOUND: "File not found.",
    Result.FORMAT: "Unsupported file or audio format.",
    Result.HEADER_MISMATCH: "There is a version mismatch between the FMOD header and either the FMOD Studio library or the FMOD Low Level library.",
    Result.HTTP: "A HTTP error occurred. This is a catch-all for HTTP errors not listed elsewhere.",
    Result.HTTP_ACCESS: "The specified resource requires authentication or is forbidden.",
    Result.HTTP_PROXY_AUTH: "Proxy authentication is required to access the specified resource.",
    Result.HTTP_SERVER_ERROR: "A HTTP server error occurred.",
    Result.HTTP_TIMEOUT: "The HTTP request timed out.",
    Result.INITIALIZATION: "FMOD was not initialized correctly to support this function.",
    Result.INITIALIZED: "Cannot call this command after System::init.",
    Result.INTERNAL: "An error occured in the FMOD system. Use the logging version of FMOD for more information.",
    Result.INVALID_FLOAT: "Value passed in was a NaN, Inf or denormalized float.",
    Result.INVALID_HANDLE: "An invalid object handle was used.",
    Result.INVALID_PARAM: "An invalid parameter was passed to this function.",
    Result.INVALID_POSITION: "An invalid seek position was passed to this function.",
    Result.INVALID_SPEAKER: "An invalid speaker was passed to this function based on the current speaker mode.",
    Result.INVALID_SYNCPOINT: "The syncpoint did not come from this sound handle.",
    Result.INVALID_THREAD: "Tried to call a function on a thread that is not supported.",
    Result.INVALID_VECTOR: "The vectors passed in are not unit length, or perpendicular.",
    Result.MAXAUDIBLE: "Reached maximum audible playback count for this sound's soundgroup.",
    Result.MEMORY: "Not enough memory or resources.",
    Result.MEMORY_CANTPOINT: "Can't use FMOD_OPENMEMORY_POINT on non PCM source data, or non mp3/xma/adpcm data if FMOD_CREATECOMPRESSEDSAMPLE was used.",
    Result.NEEDS3D: "Tried to call a command on a 2d sound when the command was meant for 3d sound.",
    Result.NEEDSHARDWARE: "Tried to use a feature that requires hardware support.",
    Result.NET_CONNECT: "Couldn't connect to the specified host.",
    Result.NET_SOCKET_ERROR: "A socket error occurred.  This is a catch-all for socket-related errors not listed elsewhere.",
    Result.NET_URL: "The specified URL couldn't be resolved.",
    Result.NET_WOULD_BLOCK: "Operation on a non-blocking socket could not complete immediately.",
    Result.NOTREADY: "Operation could not be performed because specified sound/DSP connection is not ready.",
    Result.OUTPUT_ALLOCATED: "Error initializing output device, but more specifically, the output device is already in use and cannot be reused.",
    Result.OUTPUT_CREATEBUFFER: "Error creating hardware sound buffer.",
    Result.OUTPUT_DRIVERCALL: "A call to a standard soundcard driver failed, which could possibly mean a bug in the driver or resources were missing or exhausted.",
    Result.OUTPUT_FORMAT: "Soundcard does not support the specified format.",
    Result.OUTPUT_INIT: "Error initializing output device.",
    Result.OUTPUT_NODRIVERS: "The output device has no drivers installed.  If pre-init, FMOD_OUTPUT_NOSOUND is selected as the output mode.  If post-init, the function just fails.",
    Result.PLUGIN: "An unspecified error has been returned from a plugin.",
    Result.PLUGIN_MISSING: "A requested output, dsp unit type or codec was not available.",
    Result.PLUGIN_RESOURCE: "A resource that the plugin requires cannot be allocated or found. (ie the DLS file for MIDI playback)",
    Result.PLUGIN_VERSION: "A plugin was built with an unsupported SDK version.",
    Result.RECORD: "An error occurred trying to initialize the recording device.",
    Result.REVERB_CHANNELGROUP: "Reverb properties cannot be set on this channel because a parent channelgroup owns the reverb connection.",
    Result.REVERB_INSTANCE: "Specified instance in FMOD_REVERB_PROPERTIES couldn't be set. Most likely because it is an invalid instance number or the reverb doesn't exist.",
    Result.SUBSOUNDS: "The error occurred because the sound referenced contains subsounds when it shouldn't have, or it doesn't contain subsounds when it should have.  The operation may also not be able to be performed on a parent sound.",
    Result.SUBSOUND_ALLOCATED: "This subsound is already being used by another sound, you cannot have more than one parent to a sound.  Null out the other parent's entry first.",
    Result.SUBSOUND_CANTMOVE: "Shared subsounds cannot be replaced or moved from their parent stream, such as when the parent stream is an FSB file.",
    Result.TAGNOTFOUND: "The specified tag could not be found or there are no tags.",
    Result.TOOMANYCHANNELS: "The sound created exceeds the allowable input channel count.  This can be increased using the 'maxinputchannels' parameter in System::setSoftwareFormat.",
    Result.TRUNCATED: "The retrieved string is too long to fit in the supplied buffer and has been truncated.",
    Result.UNIMPLEMENTED: "Something in FMOD hasn't been implemented when it should be. Contact support.",
    Result.UNINITIALIZED: "This command failed because System::init or System::setDriver was not called.",
    Result.UNSUPPORTED: "A command issued was not supported by this object.  Possibly a plugin without certain callbacks specified.",
    Result.VERSION: "The version number of this file format is not supported.",
    Result.EVENT_ALREADY_LOADED: "The specified bank has already been loaded.",
    Result.EVENT_LIVEUPDATE_BUSY: "The live update connection failed due to the game already being connected.",
    Result.EVENT_LIVEUPDATE_MISMATCH: "The live update connection failed due to the game data being out of sync with the tool.",
    Result.EVENT_LIVEUPDATE_TIMEOUT: "The live update connection timed out.",
    Result.EVENT_NOTFOUND: "The requested event, parameter, bus or vca could not be found.",
    Result.STUDIO_UNINITIALIZED: "The Studio::System object is not yet initialized.",
    Result.STUDIO_NOT_LOADED: "The specified resource is not loaded, so it can't be unloaded.",
    Result.INVALID_STRING: "An invalid string was passed to this function.",
    Result.ALREADY_LOCKED: "The specified resource is already locked.",
    Result.NOT_LOCKED: "The specified resource is not locked, so it can't be unlocked.",
    Result.RECORD_DISCONNECTED: "The specified recording driver has been disconnected.",
    Result.TOOMANYSAMPLES: "The length provided exceeds the allowable limit.",
}


def error_string(result: int) -> str:
    """Return the explanation of a result code; unknown codes give "Unknown error."."""
    try:
        return Result(result).message()
    except ValueError:
        return _UNKNOWN