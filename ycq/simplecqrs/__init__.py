"""An inventory example built with ycq: domain, command handlers, repositories and read model."""