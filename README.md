# groundcontrol

This package is the core of a ground station for a radio-controlled aircraft.
It has no third-party dependencies.

## What it contains

- **Flight vocabulary** (`groundcontrol.enums`). The enums are `EventType`,
  `ControlMode`, `FlightPhase`, `FlightManeuver`, `PIDFeature`, `Flaps`,
  `ServiceState`, `TypeLevel` and `RollLevel`. The controller buttons are the
  bit flags in `Button`. There are also three frozen, range-checked records:
  `GPSCoordinate`, `ControllerInput` and `ControllerOutput`.
- **Numeric helpers** (`groundcontrol.tools`). `constrain(value, low, high)`
  clamps a value to a range. `map_range(x, in_min, in_max, out_min, out_max)`
  maps an integer linearly from one range to another. Its division truncates
  toward zero.
- **Time** (`groundcontrol.timing`). `timestamp()` returns whole Unix seconds
  as an unsigned 32-bit value. `FlightClock` measures elapsed milliseconds on
  a monotonic clock, counted from the last call to `start()`.
- **Telemetry packets** (`groundcontrol.packets`). There is one frozen
  dataclass per packet kind: `ManualPacket`, `AssistPacket`, `AutoPacket`,
  `AccelPacket`, `GyroPacket`, `MagnetPacket`, `GPSPacket`, `GPSEnvPacket`,
  `BarometerPacket`, `TempHumidPacket`, `PIDPacket`, `EventPacket`,
  `EventData8Packet`, `EventData16Packet`, `EventData32Packet`,
  `EventData64Packet`, `EventTimedPacket` and `EventTimedDataPacket`.
  - Field ranges are checked when a packet is built.
  - `payload()` returns the three-byte prefix: the packet type, the header
    byte and a marker.
  - `pipe_for(packet)` returns the radio pipe number for the packet, or
    `None` if the packet has no pipe.
- **Radio queueing** (`groundcontrol.radio`).
  - `send_to_plane(packet, tx_queue)` puts a packet on the given queue. If no
    queue is given, it uses the module's `TX_QUEUE`.
  - `pipe_address(pipe)` returns the 40-bit address of pipe 0 to 5.
- **Threading helpers**.
  - `WorkQueue` (`groundcontrol.workqueue`) is a thread-safe FIFO.
    - `get()` blocks until an item is available.
    - `peek()` raises `IndexError` when the queue is empty.
    - The capacity is advisory: `full()` reports when the capacity has been
      reached, but `put()` never refuses an item.
  - `LoopThread` (`groundcontrol.worker`) runs `setup()` once on a worker
    thread, then calls `loop()` repeatedly until `stop()` is called. If
    `setup()` returns a false value, the loop does not run.
- **Flight database** (`groundcontrol.database`). `FlightDatabase` creates the
  flight-log tables in a new SQLite file. It queues plane-state, servo, GPS,
  IMU, barometer, PID and event rows and writes them in transactions.
  - Each table has 30 row slots. An insert returns `False` while every slot
    of its table is waiting to be written.
  - The table layout and the database file naming are in
    `groundcontrol.schema`: `StatementType`, `next_unique_filename()` and
    `database_filename()`.
- **Flight log** (`groundcontrol.flightlog`). `FlightLog` sits in front of the
  database. It takes fixed-point wire values and records them in physical
  units. Examples:
  - latitude and longitude are scaled by 1e-7;
  - IMU and barometer readings are scaled by 0.01.

  `insert_event(event_type, data=0, timestamp=None)` records an event. The
  timestamp defaults to the current time.
- **Session and control modes**.
  - `Session` (`groundcontrol.session`) holds the shared flight state.
  - `set_control_mode(session, mode, log, tx_queue)`
    (`groundcontrol.session_control`) switches the mode, logs the change and
    queues the packets that announce it:
    - TAXI is refused while the aircraft is not flying.
    - HOLDING sends the fixed altitude (40) and speed (30) in every case, but
      it only changes the mode when the aircraft is flying.
  - `ControlModeDispatcher` (`groundcontrol.control_modes`) maps button masks
    to actions in the MANUAL and PAIRING modes. In MANUAL mode it also turns
    stick input into a `ManualPacket`, which is built by `manual_packet(axes)`.

## Install

```
pip install .
```

## Example

```python
from groundcontrol.enums import ControlMode, EventType
from groundcontrol.flightlog import FlightLog
from groundcontrol.session import Session
from groundcontrol.session_control import set_control_mode
from groundcontrol.workqueue import WorkQueue

tx_queue = WorkQueue(100)
session = Session()

log = FlightLog.open("flight.db")
log.start()
log.insert_event(EventType.SYSTEM_STARTUP)

set_control_mode(session, ControlMode.MANUAL, log, tx_queue)
packet = tx_queue.get()          # EventPacket announcing the mode change

log.database.execute_transaction()   # write what is queued now
log.stop()
```

## How rows are written

The background loop, started with `start()`, writes a batch of up to 15 rows
in either of two cases:

- more than 10 rows are pending;
- more than a second has passed since the last write.

`FlightDatabase.execute_transaction()` writes one batch immediately and
returns the number of rows committed. If a row fails:

- the transaction is rolled back;
- the rows written before the failing one go back on the queue;
- the failing row is dropped;
- the SQLite error is raised.

`stop()` closes the database and does **not** write rows that are still
queued. Flush first if you need them.

## What it does not do

- It does not read a game controller. Stick and button input must be given
  as `ControllerInput` values and button masks.
- It does not drive a radio. Packets go onto a `WorkQueue`. Transmitting them,
  receiving packets from the aircraft and acting on them are not part of the
  package.
- It has no command-line program and no service that starts and stops the
  whole ground station.

## Tests

```
pip install .[test]
pytest
```