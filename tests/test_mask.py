from geodesics.mask import GeodesicMask


def test_output_bits_are_distinct():
    outputs = [
        GeodesicMask.LATITUDE, GeodesicMask.LONGITUDE, GeodesicMask.AZIMUTH,
        GeodesicMask.DISTANCE, GeodesicMask.DISTANCE_IN, GeodesicMask.REDUCEDLENGTH,
        GeodesicMask.GEODESICSCALE, GeodesicMask.AREA,
    ]
    out_bits = [flag & GeodesicMask.OUT_ALL for flag in outputs]
    assert len(set(out_bits)) == len(outputs)
    for bit in out_bits:
        assert bit & (bit - 1) == 0


def test_implied_capabilities():
    assert GeodesicMask.LATITUDE & GeodesicMask.CAP_ALL == GeodesicMask.CAP_NONE
    assert GeodesicMask.AZIMUTH & GeodesicMask.CAP_ALL == GeodesicMask.CAP_NONE
    assert GeodesicMask.LONGITUDE & GeodesicMask.CAP_C3
    assert GeodesicMask.DISTANCE & GeodesicMask.CAP_C1
    assert GeodesicMask.DISTANCE_IN & GeodesicMask.CAP_C1p
    assert GeodesicMask.REDUCEDLENGTH & GeodesicMask.CAP_C2
    assert GeodesicMask.GEODESICSCALE & GeodesicMask.CAP_C2
    assert GeodesicMask.AREA & GeodesicMask.CAP_C4


def test_all():
    assert GeodesicMask.ALL == 0x7F9F
    for name in ['LATITUDE', 'LONGITUDE', 'AZIMUTH', 'DISTANCE', 'DISTANCE_IN',
                 'REDUCEDLENGTH', 'GEODESICSCALE', 'AREA']:
        flag = getattr(GeodesicMask, name)
        assert GeodesicMask.ALL & flag == flag


def test_standard():
    assert GeodesicMask.STANDARD == (
        GeodesicMask.LATITUDE | GeodesicMask.LONGITUDE |
        GeodesicMask.AZIMUTH | GeodesicMask.DISTANCE
    )
    assert not GeodesicMask.STANDARD & GeodesicMask.OUT_ALL & GeodesicMask.AREA
