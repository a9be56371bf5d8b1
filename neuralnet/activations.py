import numpy as np


class Activation_Sigmoid:

    # forward pass
    def activate(self, x):
        # sigmoid(x) = 1 / (1 + exp(-x))
        # exp is only ever taken of -|x| so large inputs saturate to 0 or 1
        # instead of overflowing
        x = np.asarray(x, dtype=np.float64)
        z = np.exp(-np.abs(x))
        output = np.where(x >= 0, 1 / (1 + z), z / (1 + z))
        if output.ndim == 0:
            return float(output)
        return output

    # derivative - calculates from output of the sigmoid function
    def derivative_from_output(self, y):
        return y * (1 - y)

    def predictions(self, outputs):
        return (np.asarray(outputs) > 0.5) * 1


class Activation_ReLU:

    # forward pass
    def activate(self, x):
        output = np.maximum(0, np.asarray(x, dtype=np.float64))
        if output.ndim == 0:
            return float(output)
        return output

    # the output is positive exactly where the input was
    def derivative_from_output(self, y):
        derivative = (np.asarray(y) > 0) * 1.0
        if derivative.ndim == 0:
            return float(derivative)
        return derivative

    def predictions(self, outputs):
        return outputs


class Activation_Linear:

    # forward pass
    def activate(self, x):
        # just pass the values through
        return x

    # derivative is 1
    def derivative_from_output(self, y):
        if np.ndim(y) == 0:
            return 1.0
        return np.ones_like(y, dtype=np.float64)

    def predictions(self, outputs):
        return outputs


ACTIVATIONS = {
    'sigmoid': Activation_Sigmoid,
    'relu': Activation_ReLU,
    'linear': Activation_Linear,
}


def get_activation(activation=None):
    # sigmoid is the default for every fully-connected layer
    if activation is None:
        return Activation_Sigmoid()

    # lookup by name
    if isinstance(activation, str):
        try:
            return ACTIVATIONS[activation.lower()]()
        except KeyError:
            raise ValueError(
                f'Unknown activation {activation!r}, '
                f'expected one of {sorted(ACTIVATIONS)}') from None

    # an activation class rather than an instance
    if isinstance(activation, type):
        activation = activation()

    if not (hasattr(activation, 'activate') and
            hasattr(activation, 'derivative_from_output')):
        raise ValueError(
            f'{activation!r} does not provide activate and derivative_from_output')

    return activation
