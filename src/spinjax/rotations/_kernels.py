"""Pure quaternion kernels.

All functions operate on raw JAX arrays (no class instances) so that the
class modules can share them without circular imports.  Each kernel is
wrapped in ``jax.jit``: the integrator calls them many thousands of times
per ``advance`` and a single compiled dispatch is far cheaper than the
equivalent chain of eager operations.

Convention:
    Quaternion layout is scalar-first: ``[real, i, j, k]`` (shape ``(4,)``).
    Vectors have shape ``(3,)``.
"""

from __future__ import annotations

from functools import partial

import jax
import jax.numpy as jnp


@jax.jit
def quaternion_multiply(p: jax.Array, q: jax.Array) -> jax.Array:
    """Hamilton product ``p * q``.

    Args:
        p (jax.Array): Left quaternion, shape ``(4,)``.
        q (jax.Array): Right quaternion, shape ``(4,)``.

    Returns:
        jnp.ndarray: Product quaternion of shape ``(4,)``.
    """
    pr, pi, pj, pk = p[0], p[1], p[2], p[3]
    qr, qi, qj, qk = q[0], q[1], q[2], q[3]
    return jnp.array([
        pr * qr - pi * qi - pj * qj - pk * qk,
        pr * qi + pi * qr + pj * qk - pk * qj,
        pr * qj + pj * qr + pk * qi - pi * qk,
        pr * qk + pk * qr + pi * qj - pj * qi,
    ])


@jax.jit
def quaternion_conjugate(q: jax.Array) -> jax.Array:
    """Return ``[real, -i, -j, -k]``."""
    return q * jnp.array([1.0, -1.0, -1.0, -1.0], dtype=q.dtype)


@jax.jit
def quaternion_canonical(q: jax.Array) -> jax.Array:
    """Flip the sign of ``q`` if its real part is negative.

    ``q`` and ``-q`` describe the same rotation; the canonical member of
    the pair has a non-negative real part.
    """
    return jnp.where(q[0] < 0.0, -q, q)


@jax.jit
def quaternion_normalize(q: jax.Array) -> jax.Array:
    """Scale ``q`` to unit norm with a non-negative real part.

    A zero quaternion has no direction; the identity ``[1, 0, 0, 0]`` is
    returned for it.
    """
    n = jnp.linalg.norm(q)
    sign = jnp.where(q[0] >= 0.0, 1.0, -1.0)
    safe = jnp.where(n == 0.0, 1.0, n)
    identity = jnp.array([1.0, 0.0, 0.0, 0.0], dtype=q.dtype)
    return jnp.where(n == 0.0, identity, q * (sign / safe))


@jax.jit
def quaternion_normalize_vector(q: jax.Array) -> jax.Array:
    """Return the pure-imaginary unit quaternion along the vector part of ``q``.

    A zero vector part has no direction; ``[0, 1, 0, 0]`` is returned for it.
    """
    v = q[1:]
    n = jnp.linalg.norm(v)
    safe = jnp.where(n == 0.0, 1.0, n)
    fallback = jnp.array([0.0, 1.0, 0.0, 0.0], dtype=q.dtype)
    unit = jnp.concatenate([jnp.zeros(1, dtype=q.dtype), v / safe])
    return jnp.where(n == 0.0, fallback, unit)


@jax.jit
def quaternion_compose(p: jax.Array, q: jax.Array) -> jax.Array:
    """Compose two rotations: apply ``q`` then ``p``.

    The product is renormalized and canonicalized.
    """
    return quaternion_normalize(quaternion_multiply(p, q))


@jax.jit
def quaternion_rotate_vector(q: jax.Array, v: jax.Array) -> jax.Array:
    """Rotate a vector by conjugation, ``q * (0, v) * conj(q)``.

    Args:
        q (jax.Array): Quaternion of shape ``(4,)``.
        v (jax.Array): Vector of shape ``(3,)``.

    Returns:
        jnp.ndarray: Vector part of the conjugation, shape ``(3,)``.
    """
    qv = jnp.concatenate([jnp.zeros(1, dtype=v.dtype), v])
    rotated = quaternion_multiply(quaternion_multiply(q, qv), quaternion_conjugate(q))
    return rotated[1:]


@jax.jit
def quaternion_rotate_vectors(q: jax.Array, vs: jax.Array) -> jax.Array:
    """Rotate a stack of vectors of shape ``(n, 3)`` by ``q``."""
    return jax.vmap(quaternion_rotate_vector, in_axes=(None, 0))(q, vs)


@jax.jit
def quaternion_magnitude(q: jax.Array) -> jax.Array:
    """Rotation angle ``2 * acos(real)`` in radians.

    The real part is clipped to ``[-1, 1]`` so that rounding on a unit
    quaternion cannot produce ``nan``.
    """
    return 2.0 * jnp.arccos(jnp.clip(q[0], -1.0, 1.0))


@jax.jit
def quaternion_axis(q: jax.Array) -> jax.Array:
    """Rotation axis scaled by the rotation angle, shape ``(3,)``."""
    return quaternion_normalize_vector(q)[1:] * quaternion_magnitude(q)


@jax.jit
def quaternion_scale_to_size(q: jax.Array, angle: jax.Array) -> jax.Array:
    """Rebuild ``q`` about the same axis with the given rotation angle.

    The result is canonicalized.  A ``q`` with a zero vector part uses the
    fallback axis of :func:`quaternion_normalize_vector`.
    """
    direction = quaternion_normalize_vector(q)[1:]
    half = angle / 2.0
    out = jnp.concatenate([jnp.cos(half)[None], jnp.sin(half) * direction])
    return quaternion_canonical(out)


@jax.jit
def axis_to_quaternion(v: jax.Array) -> jax.Array:
    """Quaternion for a rotation vector whose length is the angle.

    The zero vector maps to the identity.  The result is canonicalized.
    """
    angle = jnp.linalg.norm(v)
    safe = jnp.where(angle == 0.0, 1.0, angle)
    half = angle / 2.0
    out = jnp.concatenate([jnp.cos(half)[None], v * (jnp.sin(half) / safe)])
    identity = jnp.array([1.0, 0.0, 0.0, 0.0], dtype=v.dtype)
    return quaternion_canonical(jnp.where(angle == 0.0, identity, out))


@partial(jax.jit, static_argnums=(1,))
def plane_quaternion(magnitude: jax.Array, normal_index: int, sign: float) -> jax.Array:
    """Quaternion for a rotation inside one coordinate plane.

    Args:
        magnitude (jax.Array): Rotation angle in radians.
        normal_index (int): Quaternion component (1, 2 or 3) of the axis
            normal to the plane.
        sign (float): ``+1.0`` or ``-1.0``, the orientation of the normal.

    Returns:
        jnp.ndarray: ``[cos(m/2), ...]`` with ``sign * sin(m/2)`` at
        ``normal_index`` and zeros elsewhere, canonicalized.
    """
    half = jnp.asarray(magnitude) / 2.0
    q = jnp.zeros(4, dtype=half.dtype)
    q = q.at[0].set(jnp.cos(half)).at[normal_index].set(sign * jnp.sin(half))
    return quaternion_canonical(q)
