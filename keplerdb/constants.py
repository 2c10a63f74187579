"""
Physical constants and unit conversions for keplerdb.

All values are SI unless the name says otherwise. The float32 copies at the
bottom are for render-side consumers that work in single precision.
"""
import math

import numpy as np

# Gravitation
CONSTANT_OF_GRAVITATION = 6.6743015e-11  # m^3 kg^-1 s^-2
G = CONSTANT_OF_GRAVITATION

# Unit conversions
CONVERT_KM_TO_M = 1000.0
CONVERT_M_TO_KM = 1.0 / CONVERT_KM_TO_M
CONVERT_AU_TO_M = 149_597_870_700.0  # IAU 2012 definition
CONVERT_M_TO_AU = 1.0 / CONVERT_AU_TO_M
CONVERT_AU_TO_KM = CONVERT_AU_TO_M * CONVERT_M_TO_KM
CONVERT_DEG_TO_RAD = math.pi / 180.0
CONVERT_RAD_TO_DEG = 180.0 / math.pi

TWO_PI = 2.0 * math.pi

# Time
DAY = 86400.0  # seconds per day
YEAR = 365.25 * DAY  # seconds per Julian year

# Earth
MASS_EARTH_KG = 5.972168e24
RADIUS_EARTH_EQUATOR_KM = 6378.137
RADIUS_EARTH_POLAR_KM = 6356.752
RADIUS_EARTH_MEAN_KM = 6371.0
AXIAL_TILT_EARTH_DEG = 23.4392811
CONVERT_EARTH_MASS_TO_KG = MASS_EARTH_KG

# Sun
MASS_SUN_KG = 1.98847e30
RADIUS_SUN_M = 6.957e8
FLATTENING_SUN = 0.00005

# Single precision
G_F32 = np.float32(G)
CONVERT_KM_TO_M_F32 = np.float32(CONVERT_KM_TO_M)
CONVERT_M_TO_KM_F32 = np.float32(CONVERT_M_TO_KM)
CONVERT_AU_TO_M_F32 = np.float32(CONVERT_AU_TO_M)
CONVERT_M_TO_AU_F32 = np.float32(CONVERT_M_TO_AU)
CONVERT_DEG_TO_RAD_F32 = np.float32(CONVERT_DEG_TO_RAD)
CONVERT_RAD_TO_DEG_F32 = np.float32(CONVERT_RAD_TO_DEG)
