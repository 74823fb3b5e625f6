import pbrforge as pf


def test_public_exports_exist():
    for name in (
        "generate_albedo_map",
        "generate_normal_map",
        "generate_roughness_map",
        "generate_metalness_map",
        "generate_material",
        "GenerationParameters",
        "noise3",
        "fbm",
        "hex_to_rgb",
        "__version__",
    ):
        assert hasattr(pf, name), name


def test_all_names_resolve():
    for name in pf.__all__:
        assert hasattr(pf, name), name


def test_perlin_noise_alias():
    assert pf.perlin_noise is pf.noise3
