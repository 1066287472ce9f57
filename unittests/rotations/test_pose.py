from unittest import TestCase

from concurrent.futures import ThreadPoolExecutor

import numpy as np

from posemath import rotations as rot


def random_poses(count, seed=0):

    rng = np.random.default_rng(seed)

    return [rot.hmat_create(rot.quaternion_create(*rng.normal(size=4)), rot.Vector3.from_array(rng.normal(size=3) * 5))
            for _ in range(count)]


def about(axis, angle):

    return rot.axis_angle_to_quaternion(rot.RotAxisAngle(rot.Vector3.from_array(axis), angle))


class PoseTestCase(TestCase):

    def assert_same_rotation(self, quaternion_1, quaternion_2, decimal=9):

        q1 = quaternion_1.as_array()
        q2 = quaternion_2.as_array()

        if np.dot(q1, q2) < 0:
            q2 = -q2

        np.testing.assert_array_almost_equal(q1, q2, decimal=decimal)

    def assert_same_pose(self, hmat_1, hmat_2, decimal=9):

        np.testing.assert_array_almost_equal(hmat_1.pos.as_array(), hmat_2.pos.as_array(), decimal=decimal)
        self.assert_same_rotation(hmat_1.quat, hmat_2.quat, decimal=decimal)


class TestHmatBasics(PoseTestCase):

    def test_create(self):

        quat = rot.quaternion_create(1, 2, 3, 4)
        pos = rot.Vector3(1, 2, 3)

        hmat = rot.hmat_create(quat, pos)

        self.assertIs(hmat.quat, quat)
        self.assertIs(hmat.pos, pos)

    def test_identity(self):

        hmat = rot.hmat_identity()

        self.assertEqual(hmat, rot.Hmat(rot.Vector3(0, 0, 0), rot.Quaternion(0, 0, 0, 1)))
        self.assertEqual(hmat, rot.Hmat())

    def test_transform_point(self):

        hmat = rot.hmat_create(about([0, 0, 1], np.pi / 2), rot.Vector3(1, 2, 3))

        result = rot.hmat_transform_point(hmat, rot.Vector3(1, 0, 0))

        np.testing.assert_array_almost_equal(result.as_array(), [1, 1, 3])


class TestHmatInverse(PoseTestCase):

    def test_known(self):

        hmat = rot.hmat_create(about([0, 0, 1], np.pi / 2), rot.Vector3(1, 2, 3))

        inverse = rot.hmat_inverse(hmat)

        self.assert_same_rotation(inverse.quat, about([0, 0, 1], -np.pi / 2))
        np.testing.assert_array_almost_equal(inverse.pos.as_array(), [2, -1, -3])

    def test_undoes_transform(self):

        for hmat in random_poses(20):

            point = rot.Vector3(0.5, -1, 2)

            round_trip = rot.hmat_transform_point(rot.hmat_inverse(hmat), rot.hmat_transform_point(hmat, point))

            np.testing.assert_array_almost_equal(round_trip.as_array(), point.as_array())

    def test_double_inverse(self):

        for hmat in random_poses(50, seed=1):

            self.assert_same_pose(rot.hmat_inverse(rot.hmat_inverse(hmat)), hmat)

    def test_composite_with_inverse(self):

        for hmat in random_poses(20, seed=2):

            self.assert_same_pose(rot.hmat_composite(hmat, rot.hmat_inverse(hmat)), rot.hmat_identity())
            self.assert_same_pose(rot.hmat_composite(rot.hmat_inverse(hmat), hmat), rot.hmat_identity())


class TestHmatComposite(PoseTestCase):

    def test_translation_only(self):

        h_a2b = rot.hmat_create(rot.quaternion_identity(), rot.Vector3(1, 2, 3))
        h_b2c = rot.hmat_create(rot.quaternion_identity(), rot.Vector3(-1, 0, 5))

        h_a2c = rot.hmat_composite(h_a2b, h_b2c)

        self.assertEqual(h_a2c.pos, rot.Vector3(0, 2, 8))
        self.assertEqual(h_a2c.quat, rot.Quaternion(0, 0, 0, 1))

    def test_operand_order(self):

        translate = rot.hmat_create(rot.quaternion_identity(), rot.Vector3(1, 0, 0))
        turn = rot.hmat_create(about([0, 0, 1], np.pi / 2), rot.Vector3(0, 0, 0))

        np.testing.assert_array_almost_equal(rot.hmat_composite(translate, turn).pos.as_array(), [0, -1, 0])
        np.testing.assert_array_almost_equal(rot.hmat_composite(turn, translate).pos.as_array(), [1, 0, 0])

    def test_chains_point_maps(self):

        poses = random_poses(20, seed=3)

        for h_a2b, h_b2c in zip(poses[::2], poses[1::2]):

            point = rot.Vector3(3, -2, 1)

            expected = rot.hmat_transform_point(h_b2c, rot.hmat_transform_point(h_a2b, point))

            result = rot.hmat_transform_point(rot.hmat_composite(h_a2b, h_b2c), point)

            np.testing.assert_array_almost_equal(result.as_array(), expected.as_array())

    def test_associative(self):

        poses = random_poses(30, seed=4)

        for h1, h2, h3 in zip(poses[::3], poses[1::3], poses[2::3]):

            left = rot.hmat_composite(rot.hmat_composite(h1, h2), h3)
            right = rot.hmat_composite(h1, rot.hmat_composite(h2, h3))

            self.assert_same_pose(left, right)


class TestHmatRelative(PoseTestCase):

    def test_chaining_law(self):

        poses = random_poses(20, seed=5)

        for h_i2c, h_i2a in zip(poses[::2], poses[1::2]):

            h_a2c = rot.hmat_relative(h_i2c, h_i2a)

            self.assert_same_pose(rot.hmat_composite(h_i2a, h_a2c), h_i2c)

    def test_translation_only(self):

        h_i2c = rot.hmat_create(rot.quaternion_identity(), rot.Vector3(5, 5, 5))
        h_i2a = rot.hmat_create(rot.quaternion_identity(), rot.Vector3(1, 2, 3))

        h_a2c = rot.hmat_relative(h_i2c, h_i2a)

        np.testing.assert_array_almost_equal(h_a2c.pos.as_array(), [4, 3, 2])

        # without rotation the operands may also be applied in the other order
        self.assert_same_pose(rot.hmat_composite(h_a2c, h_i2a), h_i2c)

    def test_relative_to_self(self):

        for hmat in random_poses(10, seed=6):

            self.assert_same_pose(rot.hmat_relative(hmat, hmat), rot.hmat_identity())


class TestWrapAngle(TestCase):

    def test_range(self):

        for angle in np.linspace(-10 * np.pi, 10 * np.pi, 1001):

            wrapped = rot.wrap_angle(angle)

            self.assertGreater(wrapped, -np.pi)
            self.assertLessEqual(wrapped, np.pi)
            self.assertAlmostEqual(np.cos(wrapped), np.cos(angle))
            self.assertAlmostEqual(np.sin(wrapped), np.sin(angle))

    def test_boundaries(self):

        self.assertEqual(rot.wrap_angle(np.pi), np.pi)
        self.assertEqual(rot.wrap_angle(-np.pi), np.pi)
        self.assertEqual(rot.wrap_angle(0.0), 0.0)
        self.assertAlmostEqual(rot.wrap_angle(1.9 * np.pi), -0.1 * np.pi)


class TestHmatAverage(PoseTestCase):

    def test_with_itself(self):

        for hmat in random_poses(50, seed=7):

            self.assertEqual(rot.hmat_average(hmat, hmat), hmat)

            # an equal pose built separately gives the same exact answer
            copy = rot.hmat_create(rot.Quaternion(*hmat.quat.as_array()), rot.Vector3(*hmat.pos.as_array()))

            self.assertEqual(rot.hmat_average(copy, hmat), hmat)
            self.assertEqual(rot.PoseAverager()(copy, hmat), hmat)

    def test_translation_midpoint(self):

        h_i2a = rot.hmat_create(rot.quaternion_identity(), rot.Vector3(0, 0, 0))
        h_i2b = rot.hmat_create(rot.quaternion_identity(), rot.Vector3(2, 4, -6))

        np.testing.assert_array_almost_equal(rot.hmat_average(h_i2b, h_i2a).pos.as_array(), [1, 2, -3])

    def test_rotation_midpoint(self):

        h_i2a = rot.hmat_create(about([0, 1, 0], 0.2), rot.Vector3(0, 0, 0))
        h_i2b = rot.hmat_create(about([0, 1, 0], 1.0), rot.Vector3(0, 0, 0))

        self.assert_same_rotation(rot.hmat_average(h_i2b, h_i2a).quat, about([0, 1, 0], 0.6))

    def test_half_turn(self):

        h_i2a = rot.hmat_create(rot.Quaternion(0, 0, 0, 1), rot.Vector3(0, 0, 0))
        h_i2b = rot.hmat_create(rot.Quaternion(0, 0, 1, 0), rot.Vector3(2, 0, 0))

        h_i2c = rot.hmat_average(h_i2b, h_i2a)

        self.assertFalse(np.isnan(h_i2c.quat.as_array()).any())

        # an exact half turn stays at +pi after wrapping so the midpoint is +pi/2
        np.testing.assert_array_almost_equal(h_i2c.quat.as_array(), [0, 0, np.sin(np.pi / 4), np.cos(np.pi / 4)])
        np.testing.assert_array_almost_equal(h_i2c.pos.as_array(), [1, 0, 0])

        # and the answer is the same every time
        self.assertEqual(rot.hmat_average(h_i2b, h_i2a), h_i2c)

    def test_half_turn_general(self):

        for h_i2a in random_poses(10, seed=8):

            offset = rot.hmat_create(about([0, 0.6, 0.8], np.pi), rot.Vector3(0, 0, 0))

            h_i2b = rot.hmat_composite(h_i2a, offset)

            h_i2c = rot.hmat_average(h_i2b, h_i2a)

            self.assertFalse(np.isnan(h_i2c.quat.as_array()).any())
            self.assertFalse(np.isnan(h_i2c.pos.as_array()).any())

            half = rot.hmat_relative(h_i2c, h_i2a).quat

            self.assertAlmostEqual(abs(rot.wrap_angle(rot.quaternion_to_axis_angle(half).angle)), np.pi / 2)
            self.assert_same_rotation(rot.quaternion_composite(half, half), offset.quat)

    def test_takes_short_way(self):

        h_i2a = rot.hmat_identity()

        # 1.9 pi about z is the same as -0.1 pi, so the midpoint is -0.05 pi rather than 0.95 pi
        h_i2b = rot.hmat_create(about([0, 0, 1], 1.9 * np.pi), rot.Vector3(0, 0, 0))

        self.assert_same_rotation(rot.hmat_average(h_i2b, h_i2a).quat, about([0, 0, 1], -0.05 * np.pi))

    def test_straddles_pi(self):

        # relative rotations just either side of pi end up on opposite sides of the midpoint
        h_i2a = rot.hmat_identity()

        below = rot.hmat_create(about([1, 0, 0], np.pi - 0.01), rot.Vector3(0, 0, 0))
        above = rot.hmat_create(about([1, 0, 0], np.pi + 0.01), rot.Vector3(0, 0, 0))

        self.assert_same_rotation(rot.hmat_average(below, h_i2a).quat, about([1, 0, 0], (np.pi - 0.01) / 2))
        self.assert_same_rotation(rot.hmat_average(above, h_i2a).quat, about([1, 0, 0], -(np.pi - 0.01) / 2))


class TestHmatInterpolate(PoseTestCase):

    def test_end_points(self):

        poses = random_poses(20, seed=9)

        for h_i2a, h_i2b in zip(poses[::2], poses[1::2]):

            self.assertEqual(rot.hmat_interpolate(h_i2a, h_i2b, 0.0), h_i2a)
            self.assert_same_pose(rot.hmat_interpolate(h_i2a, h_i2b, 1.0), h_i2b)

    def test_matches_average(self):

        poses = random_poses(10, seed=10)

        for h_i2a, h_i2b in zip(poses[::2], poses[1::2]):

            self.assertEqual(rot.hmat_interpolate(h_i2a, h_i2b, 0.5), rot.hmat_average(h_i2b, h_i2a))

    def test_quarter(self):

        h_i2a = rot.hmat_identity()
        h_i2b = rot.hmat_create(about([0, 0, 1], 1.0), rot.Vector3(4, 0, 0))

        h_i2c = rot.hmat_interpolate(h_i2a, h_i2b, 0.25)

        self.assert_same_rotation(h_i2c.quat, about([0, 0, 1], 0.25))
        np.testing.assert_array_almost_equal(h_i2c.pos.as_array(), [1, 0, 0])


class TestPoseAverager(PoseTestCase):

    def test_defaults(self):

        averager = rot.PoseAverager()

        self.assertEqual(averager.fraction, 0.5)
        self.assertEqual(averager.degenerate_axis_threshold, rot.DEGENERATE_AXIS_THRESHOLD)

        h_i2a, h_i2b = random_poses(2, seed=11)

        self.assertEqual(averager(h_i2b, h_i2a), rot.hmat_average(h_i2b, h_i2a))
        self.assertEqual(averager.average(h_i2b, h_i2a), rot.hmat_average(h_i2b, h_i2a))

    def test_options(self):

        averager = rot.PoseAverager(rot.PoseAveragerOptions(fraction=0.25))

        h_i2a, h_i2b = random_poses(2, seed=12)

        self.assertEqual(averager(h_i2b, h_i2a), rot.hmat_interpolate(h_i2a, h_i2b, 0.25))

    def test_reset_settings(self):

        options = rot.PoseAveragerOptions(fraction=0.75)

        averager = rot.PoseAverager(options)

        averager.fraction = 0.1
        averager.degenerate_axis_threshold = 1.0

        averager.reset_settings()

        self.assertEqual(averager.fraction, 0.75)
        self.assertEqual(averager.degenerate_axis_threshold, rot.DEGENERATE_AXIS_THRESHOLD)

        # changing the options afterwards does not change what reset restores
        options.fraction = 0.9
        averager.reset_settings()

        self.assertEqual(averager.fraction, 0.75)
        self.assertEqual(averager.original_options, rot.PoseAveragerOptions(fraction=0.75))

    def test_threshold(self):

        h_i2a = rot.hmat_identity()
        h_i2b = rot.hmat_create(about([0, 0, 1], 1e-3), rot.Vector3(0, 0, 0))

        coarse = rot.PoseAverager(rot.PoseAveragerOptions(degenerate_axis_threshold=1e-2))

        # the small rotation is below the coarse threshold so it is treated as no rotation
        self.assertEqual(coarse(h_i2b, h_i2a).quat, rot.Quaternion(0, 0, 0, 1))

        fine = rot.PoseAverager()

        self.assert_same_rotation(fine(h_i2b, h_i2a).quat, about([0, 0, 1], 5e-4))


class TestThreading(PoseTestCase):

    def test_parallel_calls(self):

        poses = random_poses(200, seed=13)
        pairs = list(zip(poses[::2], poses[1::2]))

        def work(pair):
            h_i2a, h_i2b = pair
            return (rot.hmat_average(h_i2b, h_i2a),
                    rot.hmat_relative(h_i2b, h_i2a),
                    rot.dcm_to_quaternion(rot.quaternion_to_dcm(h_i2a.quat)))

        expected = [work(pair) for pair in pairs]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(work, pairs))

        self.assertEqual(results, expected)
