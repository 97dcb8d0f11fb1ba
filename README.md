# ecusim

A pure-Python simulation of two automotive ECUs. Each one is built as a
layered stack of simulated drivers, hardware abstraction, basic software
services, a runtime environment and application components.

- **Headlight ECU** (`ecusim.headlight_ecu.HeadlightEcu`): reads an ambient
  light sensor and receives speed and steering angle from a simulated CAN
  receive path (`CanRxDriver`, `CanIfRx`, `RxPduRouter`, `RxCom`). It chooses
  `HeadlightState.OFF`, `NORMAL` or `HIGH_BEAM` and drives two digital output
  channels of a simulated port (`Dio`).
- **Vehicle state ECU** (`ecusim.vehicle_ecu.VehicleStateEcu`): samples speed
  and steering angle sensors and packs them into a three-byte frame. The frame
  is sent down a COM / PDU router / CAN interface / CAN driver transmit chain
  (`ecusim.tx_stack.build_tx_stack`).

Three stand-alone services are also included:

- `ecusim.dem.DiagnosticEventManager` records up to ten diagnostic events and
  reports, clears and checks them.
- `ecusim.dcm.DiagnosticCommunicationManager` answers session control, ECU
  reset, read DTC and clear DTC requests, using an event manager.
- `ecusim.mem.MemoryManager` hands out byte buffers and keeps track of up to
  100 allocations.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Command line

Each ECU has its own command. The command runs the ECU's task cycle a number
of times and prints one line per cycle:

```
ecusim-headlight --cycles 5 --seed 1
ecusim-vehicle-state --cycles 5 --seed 1
```

`--cycles` defaults to 10. `--seed` makes the simulated sensor readings
repeatable.

## Library use

You can use the decision logic on its own:

```python
from ecusim.headlight_controller import compute_headlight_mode
from ecusim.types import HeadlightState

assert compute_headlight_mode(ambient=200, speed=90, angle=60) is HeadlightState.HIGH_BEAM
```

You can also build a whole ECU and step it one cycle at a time:

```python
from ecusim.headlight_ecu import HeadlightEcu
from ecusim.vehicle_ecu import VehicleStateEcu
from ecusim.vehicle_state_sensor import encode_frame

cycle = HeadlightEcu(seed=1).run_cycle()
print(cycle.ambient, cycle.speed, cycle.steering_angle, cycle.state)

sent = VehicleStateEcu(seed=1).run_cycle()
print(sent.frame.sdu.hex())

frame = encode_frame(speed=120, angle=-15)  # speed byte, then angle * 10, big-endian
```

Errors are raised as exceptions derived from `ecusim.types.EcuError`. They are
not returned as status codes. The services report their activity through the
standard `logging` module.

## What it does not do

- Everything is simulated. Nothing talks to real CAN hardware, ADCs or GPIO.
  The CAN receive driver always delivers the same fixed frame. Sensor values
  come from a random number generator.
- There is no real-time operating system or scheduler. `run_cycle` runs an
  ECU's tasks once, one after another, in the order their events chain them.
- The two ECUs are not connected to each other. Frames sent by the vehicle
  state ECU are only recorded by its CAN driver (`TxCanDriver.sent`).
- The diagnostic and memory services are not wired into either ECU, and there
  is no diagnostic transport. You create them and call them directly.
- Nothing is stored between runs.