class NeuralNetError(Exception):
    pass


# input vector or weight array does not match the width of a layer
class ShapeMismatchError(NeuralNetError, ValueError):
    pass


# bad neuron counts or a bad number of layers
class TopologyError(NeuralNetError, ValueError):
    pass
