def test_compile():
    import geoplanar
    import geoplanar.angles
    import geoplanar.coordinates
    import geoplanar.dms
    import geoplanar.errors
    import geoplanar.isometric
    import geoplanar.projection
    import geoplanar.utils.logging
    import geoplanar.utils.mixins

    assert geoplanar.__version__
    for name in geoplanar.__all__:
        assert hasattr(geoplanar, name)
