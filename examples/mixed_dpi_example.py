"""Example: Resolving a mixed-DPI monitor layout.

This script builds a three monitor layout in code, resolves the logical
desktop and converts a few points between physical and logical space.
"""

from displaytopo import (
    CoordinateMapper,
    DisconnectedTopologyError,
    Display,
    DisplayService,
    Point,
    Rect,
    StaticDisplayRegistry,
    resolve,
)


def main():
    """Run display topology examples."""
    displays = [
        Display(physical_bounds=Rect(-1500, 100, 1500, 900), scale=1.5, name="left"),
        Display(physical_bounds=Rect(0, 0, 1920, 1080), scale=1.0, is_main=True, name="main"),
        Display(physical_bounds=Rect(0, 1080, 2000, 1200), scale=2.0, name="below"),
    ]

    print("=" * 70)
    print("displaytopo - Example Usage")
    print("=" * 70)
    print()

    # Example 1: Resolve logical bounds
    print("Example 1: Logical Bounds")
    print("-" * 70)

    resolved = resolve(displays)
    for display in resolved:
        print(f"  {display.name:<6} physical {display.physical_bounds}")
        print(f"  {'':<6} logical  {display.logical_bounds}")

    mapper = CoordinateMapper(resolved)
    print(f"Total logical bounds: {mapper.total_bounds()}")
    print()

    # Example 2: Round-trip conversion
    print("Example 2: Round-trip Conversion (Physical <-> Logical)")
    print("-" * 70)

    physical = Point(-750, 550)
    display = mapper.display_for_point(physical, physical=True)
    logical = mapper.physical_to_logical(physical, display)
    back = mapper.logical_to_physical(logical, display)

    print(f"Physical {physical} is on '{display.name}'")
    print(f"Logical:  {logical}")
    print(f"Back:     {back}")
    assert abs(back.x - physical.x) < 1e-6 and abs(back.y - physical.y) < 1e-6
    print("[OK] Round-trip conversion successful!")
    print()

    # Example 3: Service with hot-plug
    print("Example 3: Display Service")
    print("-" * 70)

    registry = StaticDisplayRegistry(displays)
    service = DisplayService(registry)
    service.add_listener(
        lambda old, new: print(f"  topology changed: {len(old)} -> {len(new)} displays")
    )
    service.refresh()

    # A monitor that touches nothing is rejected and the old topology kept
    registry.set_displays(displays + [Display(physical_bounds=Rect(9000, 0, 800, 600))])
    if not service.refresh():
        assert isinstance(service.last_error, DisconnectedTopologyError)
        print(f"  refresh rejected: {service.last_error}")
    print(f"  still using {len(service.displays)} displays")
    print()

    print("=" * 70)
    print("Examples complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
