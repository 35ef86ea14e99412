"""Example: connect a circle to a few targets and print the segments."""

from outline_connector import (
    Circle,
    CircleMarker,
    Connector,
    LatLng,
    PlanarProjection,
    generate_tikz_document,
    segments_to_svg_path,
    square_marker,
)


def main() -> None:
    geometries = [
        Circle(LatLng(lat=0.0, lng=0.0), radius=10.0),
        Circle(LatLng(lat=0.0, lng=100.0), radius=5.0),
        square_marker(LatLng(lat=80.0, lng=60.0), radius=12.0),
        CircleMarker(LatLng(lat=-60.0, lng=-40.0), radius=6.0),
        LatLng(lat=-30.0, lng=90.0),
    ]
    connector = Connector(geometries, {"color": "#aa3300", "weight": 2})
    segments = connector.project(PlanarProjection())

    # targets without a boundary pair emit no segment
    for (x1, y1), (x2, y2) in segments:
        print(f"({x1:.3f}, {y1:.3f}) -> ({x2:.3f}, {y2:.3f})")

    print(f"\nSVG path: {segments_to_svg_path(segments)}")
    print(f"\n{generate_tikz_document(segments, connector.options)}")


if __name__ == "__main__":
    main()
