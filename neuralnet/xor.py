from .network import NeuralNet

# hand-tuned 'magic' weights & biases that make a 2-2-1 net approximate XOR
# hidden layer: 3 inputs (x1, x2, bias) x 2 neurons
XOR_HIDDEN_WEIGHTS = [54, 14, 17, 14, -8, -20]
# output layer: 3 inputs (h1, h2, bias) x 1 neuron
XOR_OUTPUT_WEIGHTS = [92, -92, -48]

XOR_INPUTS = [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0]]
XOR_TARGETS = [0, 1, 1, 0]


def create_xor_net(logger=None):
    # create the net
    net = NeuralNet(2, [2], 1, logger=logger)

    # set the weights directly on the layers
    net.layers[1].weights = XOR_HIDDEN_WEIGHTS
    net.layers[2].weights = XOR_OUTPUT_WEIGHTS

    return net
